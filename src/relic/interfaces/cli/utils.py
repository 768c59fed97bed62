import json
import logging
import os
import traceback
from pathlib import Path
from typing import Any

import click

from relic.config import RootConfig, read_file

DEFAULT_CONFIG_PATH = Path("~/.config/relic/relic.yml")
DEFAULT_LOG_LEVEL = "WARNING"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def env_enabled(name: str) -> bool:
    """Whether a RELIC_* switch such as RELIC_DEBUG is turned on.

    Unset or empty means off; otherwise any of 1/true/yes/on in any case.
    """
    return os.environ.get(name, "").strip().lower() in _TRUE_VALUES


def resolve_config_path(cli_path: str | None) -> Path:
    """Pick the configuration file to load.

    Priority order:
    1. --config option
    2. RELIC_CONFIG environment variable
    3. ~/.config/relic/relic.yml
    """
    if cli_path:
        return Path(cli_path)
    env_path = os.environ.get("RELIC_CONFIG")
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH.expanduser()


def configure_logging(debug: bool = False) -> None:
    """Send log records from every relic module to stderr.

    --debug or RELIC_DEBUG selects DEBUG. Otherwise RELIC_LOG_LEVEL names
    the level, and an unset or unknown name falls back to WARNING.
    """
    if debug or env_enabled("RELIC_DEBUG"):
        level = logging.DEBUG
    else:
        name = os.environ.get("RELIC_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Repeated invocations in one process must not stack handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
    root_logger.addHandler(stream_handler)


def load_config(config_path: str | None) -> RootConfig:
    path = resolve_config_path(config_path)
    return read_file(path)


def error_details(error: Exception, debug: bool = False) -> dict[str, Any]:
    """Describe a failed command.

    The message is enough for configuration problems. With ``debug`` the
    exception class and the traceback of the exception being handled are
    attached as well.
    """
    details: dict[str, Any] = {"error": str(error)}
    if debug:
        details["type"] = type(error).__name__
        details["traceback"] = traceback.format_exc()
    return details


def output_result(result: Any, json_output: bool = False) -> None:
    """Print a command's result.

    With ``json_output`` the result is wrapped in a ``{"status": "ok"}``
    envelope; otherwise lists print one item per line.
    """
    if json_output:
        click.echo(json.dumps({"status": "ok", "result": result}, indent=2, default=str))
    elif isinstance(result, list):
        for row in result:
            click.echo(row)
    else:
        click.echo(result)


def report_error(error: Exception, json_output: bool = False, debug: bool = False) -> None:
    """Print why the command failed, then abort with a non-zero exit status.

    JSON goes to stdout so scripts can parse it; plain text goes to stderr.
    """
    details = error_details(error, debug)

    if json_output:
        click.echo(json.dumps({"status": "error", **details}, indent=2))
    else:
        message = details["error"]
        if "type" in details:
            message = f"{details['type']}: {message}"
        click.echo(f"Error: {message}", err=True)
        if "traceback" in details:
            click.echo(details["traceback"], err=True)

    raise click.Abort()
