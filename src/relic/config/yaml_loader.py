"""YAML loading that keeps plain scalars as written.

PINs, serial numbers and hex key IDs look like numbers or booleans to a
YAML 1.1 resolver (``0123`` is octal 83, ``yes`` is True). Turning those
back into strings does not give the original text, so plain scalars are
left as strings and the pydantic models convert the fields that really
are ints or bools.
"""

from typing import Any

import yaml

__all__ = ["StringScalarLoader", "load_yaml"]

_KEPT_TAGS = {"tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"}


class StringScalarLoader(yaml.SafeLoader):
    """SafeLoader that only resolves null and merge keys implicitly."""


StringScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_yaml(data: str | bytes) -> Any:
    """Parse a YAML document with :class:`StringScalarLoader`.

    Raises:
        yaml.YAMLError: If the document is malformed
    """
    return yaml.load(data, Loader=StringScalarLoader)
