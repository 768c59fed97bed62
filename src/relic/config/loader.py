import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from relic.config.errors import ConfigIOError, ConfigParseError
from relic.config.models import RootConfig
from relic.config.normalizer import normalize
from relic.config.yaml_loader import load_yaml

logger = logging.getLogger(__name__)

__all__ = ["parse_config", "read_file"]


def parse_config(data: str | bytes) -> RootConfig:
    """Parse a YAML document into a configuration tree.

    This is a structural parse only: no fingerprints are checked and no
    references are resolved. Use :func:`read_file` to get a normalized
    configuration.

    Args:
        data: The YAML document

    Returns:
        The parsed, not yet normalized, configuration

    Raises:
        ConfigParseError: If the YAML is malformed or a value has the wrong type
    """
    try:
        raw = load_yaml(data)
    except yaml.YAMLError as exc:
        raise ConfigParseError(f"Invalid YAML in configuration: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigParseError(
            f"Configuration must be a mapping, got {type(raw).__name__}"
        )

    try:
        return RootConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigParseError(f"Configuration validation error: {exc}") from exc


def read_file(path: str | Path) -> RootConfig:
    """Load, parse and normalize a configuration file.

    Any failure aborts the whole load; a configuration is only returned
    once every step has succeeded.

    Args:
        path: Location of the configuration file

    Returns:
        The normalized configuration

    Raises:
        ConfigIOError: If the configuration file or its pinfile cannot be read
        ConfigParseError: If either document is malformed
        ConfigValidationError: If a client fingerprint is malformed
    """
    logger.debug("Loading configuration from %s", path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise ConfigIOError(f"Failed to read configuration {path}: {exc}") from exc

    config = parse_config(data)
    config._set_path(str(path))
    return normalize(config)
