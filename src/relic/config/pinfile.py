"""Token PINs kept in a separate file from the main configuration.

The pinfile is a flat YAML mapping of token name to PIN::

    mytoken: "123456"
    othertoken: ""

It lets the main configuration be world-readable while the PINs stay in a
file with tighter permissions.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import RootModel, ValidationError, model_validator

from relic.config.errors import ConfigIOError, ConfigParseError
from relic.config.models import RootConfig
from relic.config.yaml_loader import load_yaml

logger = logging.getLogger(__name__)

__all__ = ["load_pinfile", "apply_pinfile"]


class PinFileModel(RootModel[dict[str, str]]):
    @model_validator(mode="before")
    @classmethod
    def _null_pin_is_empty(cls, value: Any) -> Any:
        # "mytoken:" with no value is an empty PIN
        if isinstance(value, dict):
            return {name: "" if pin is None else pin for name, pin in value.items()}
        return value


def load_pinfile(path: str | Path) -> dict[str, str]:
    """Read a pinfile.

    Args:
        path: Location of the pinfile

    Returns:
        Mapping of token name to PIN

    Raises:
        ConfigIOError: If the file cannot be read
        ConfigParseError: If the file is not a mapping of strings
    """
    try:
        with open(path, "rb") as f:
            contents = f.read()
    except OSError as exc:
        raise ConfigIOError(f"error reading PinFile: {exc}") from exc

    try:
        data = load_yaml(contents)
    except yaml.YAMLError as exc:
        raise ConfigParseError(f"error reading PinFile: {exc}") from exc

    if data is None:
        return {}

    try:
        return PinFileModel.model_validate(data).root
    except ValidationError as exc:
        raise ConfigParseError(f"error reading PinFile: {exc}") from exc


def apply_pinfile(config: RootConfig) -> None:
    """Overwrite token PINs with the ones from ``config.pinfile``.

    PINs for tokens that are not defined in the configuration are ignored.
    Does nothing when no pinfile is configured.
    """
    if not config.pinfile:
        return

    pins = load_pinfile(config.pinfile)
    tokens = config.tokens or {}
    applied = 0
    for token_name, pin in pins.items():
        token = tokens.get(token_name)
        if token is None:
            logger.debug("Ignoring PIN for undefined token '%s'", token_name)
            continue
        token.pin = pin
        applied += 1
    logger.debug("Applied %d PIN(s) from %s", applied, config.pinfile)
