"""Typer application and command routing."""

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import ics_command, offset_command, url_command, vtimezone_command
from cli.context import CLIContext, set_context

app = typer.Typer(
    help="Build 'add to calendar' links and ICS files.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug messages")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only show errors")
    ] = False,
) -> None:
    """Configure logging and the shared command context."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


app.command("url")(url_command)
app.command("ics")(ics_command)
app.command("vtimezone")(vtimezone_command)
app.command("offset")(offset_command)
