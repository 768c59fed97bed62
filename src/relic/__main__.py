import click

from relic.config import BuildInfo
from relic.interfaces.cli.check import check
from relic.interfaces.cli.keys import list_keys, list_tokens, show_key

BUILD_INFO = BuildInfo()


@click.group(invoke_without_command=True)
@click.version_option(BUILD_INFO.version, message=f"{BUILD_INFO.user_agent} ({BUILD_INFO.author})")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """relic configuration tool"""
    # Show help when no subcommand is provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(check)
cli.add_command(list_tokens)
cli.add_command(list_keys)
cli.add_command(show_key)


if __name__ == "__main__":
    cli()
