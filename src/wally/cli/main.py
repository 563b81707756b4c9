"""Wally CLI entry point."""

import typer

from wally import __version__
from wally.cli.add_cmd import add
from wally.cli.inspect_cmd import inspect
from wally.cli.list_cmd import list_components

app = typer.Typer(
    name="wally",
    help="Beautiful Angular components for your project",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Register subcommands
app.command()(add)
app.command()(inspect)
app.command(name="list")(list_components)
app.command(name="ls", hidden=True)(list_components)


@app.command(name="help")
def help_command(ctx: typer.Context) -> None:
    """Show usage and exit."""
    typer.echo(ctx.parent.get_help() if ctx.parent else ctx.get_help())


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"wally {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Beautiful Angular components for your project."""
