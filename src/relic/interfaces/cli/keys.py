import click

from relic.config import ConfigError
from relic.interfaces.cli.utils import (
    configure_logging,
    load_config,
    report_error,
    output_result,
)


@click.command(name="tokens")
@click.option("--config", "config_path", help="Path to the relic configuration file")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def list_tokens(config_path: str | None, json_output: bool, debug: bool) -> None:
    """List the token sections and their provider type."""
    configure_logging(debug)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        report_error(e, json_output, debug)
        return

    tokens = config.tokens or {}
    if json_output:
        output_result({name: tokens[name].type for name in sorted(tokens)}, json_output)
    else:
        output_result([f"{name} ({tokens[name].type})" for name in sorted(tokens)])


@click.command(name="keys")
@click.option("--all", "include_hidden", is_flag=True, help="Include hidden keys")
@click.option("--config", "config_path", help="Path to the relic configuration file")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def list_keys(
    include_hidden: bool, config_path: str | None, json_output: bool, debug: bool
) -> None:
    """List key names. Keys marked 'hide' are only shown with --all."""
    configure_logging(debug)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        report_error(e, json_output, debug)
        return

    output_result(config.list_keys(include_hidden=include_hidden), json_output)


@click.command(name="key")
@click.argument("name")
@click.option("--config", "config_path", help="Path to the relic configuration file")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def show_key(name: str, config_path: str | None, json_output: bool, debug: bool) -> None:
    """Resolve a key, following an alias, and show where it lives.

    \b
    Examples:
        relic-config key release
        relic-config key current --json-output
    """
    configure_logging(debug)

    try:
        config = load_config(config_path)
        key = config.get_key(name)
    except ConfigError as e:
        report_error(e, json_output, debug)
        return

    token = key.token_config
    details = {
        "name": key.name,
        "token": key.token,
        "token_defined": token is not None,
        "token_type": token.type if token is not None else None,
        "label": key.label,
        "id": key.id,
        "roles": key.roles,
        "timestamp": key.timestamp,
    }
    if json_output:
        output_result(details, json_output)
        return

    lines = [f"{click.style('🔑 Key:', fg='cyan')} {key.name}"]
    if key.name != name:
        lines.append(f"   alias: {name} -> {key.name}")
    if token is None:
        lines.append(f"   token: {key.token} {click.style('(not defined)', fg='red')}")
    else:
        lines.append(f"   token: {key.token} ({token.type})")
    if key.label:
        lines.append(f"   label: {key.label}")
    if key.id:
        lines.append(f"   id: {key.id}")
    if key.roles:
        lines.append(f"   roles: {', '.join(key.roles)}")
    output_result("\n".join(lines))
