from typing import Any

import click

from relic.config import ConfigError, RootConfig
from relic.interfaces.cli.utils import (
    configure_logging,
    load_config,
    report_error,
    output_result,
)

SECTIONS = ("server", "remote", "timestamp", "amqp")


def summarize_config(config: RootConfig) -> dict[str, Any]:
    """Summarize what a loaded configuration defines, without any secrets."""
    return {
        "path": config.path,
        "tokens": len(config.tokens or {}),
        "keys": len(config.keys or {}),
        "clients": len(config.clients or {}),
        "sections": [name for name in SECTIONS if getattr(config, name) is not None],
        "pinfile": config.pinfile,
    }


def _format_summary(summary: dict[str, Any]) -> str:
    output = [
        f"{click.style('✅ Configuration is valid:', fg='green', bold=True)} {summary['path']}",
        f"   • {summary['tokens']} token(s)",
        f"   • {summary['keys']} key(s)",
        f"   • {summary['clients']} client(s)",
    ]
    if summary["sections"]:
        output.append(f"   • sections: {', '.join(summary['sections'])}")
    if summary["pinfile"]:
        output.append(f"   • pinfile: {summary['pinfile']}")
    return "\n".join(output)


@click.command(name="check")
@click.option("--config", "config_path", help="Path to the relic configuration file")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def check(config_path: str | None, json_output: bool, debug: bool) -> None:
    """Load a configuration file and report whether it is valid.

    \b
    Examples:
        relic-config check
        relic-config check --config /etc/relic/relic.yml
        relic-config check --json-output
    """
    configure_logging(debug)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        report_error(e, json_output, debug)
        return

    summary = summarize_config(config)
    if json_output:
        output_result(summary, json_output)
    else:
        output_result(_format_summary(summary))
