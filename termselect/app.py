import logging
import os
from typing import Annotated

import typer
from rich.console import Console
from typer import Context

from . import __version__, config
from .commands import settings as settings_app
from .commands.demo import DemoCommand
from .commands.pick import PickCommand

app = typer.Typer()
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"termselect version: {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """debug logs go to a file, the terminal belongs to the prompt"""
    if not verbose:
        return
    log_path = os.path.abspath(config.get_log_path())
    root = logging.getLogger("termselect")
    root.setLevel(logging.DEBUG)
    for existing in root.handlers:
        if getattr(existing, "baseFilename", None) == log_path:
            return
    handler = logging.FileHandler(log_path)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root.addHandler(handler)


@app.callback(invoke_without_command=True)
def main(
    ctx: Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="show version and exit",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="write debug logs to the data dir")
    ] = False,
):
    """interactive single choice prompts for the terminal"""
    setup_logging(verbose)
    ctx.obj = {"settings": config.load_config()}


app.add_typer(settings_app.app, name="settings")


@app.command()
def pick(
    ctx: Context,
    options: Annotated[list[str], typer.Argument(help="the options to choose from")],
    message: Annotated[
        str, typer.Option("--message", "-m", help="the question shown above the list")
    ] = "choose an option:",
    default: Annotated[
        str | None,
        typer.Option("--default", "-d", help="option selected when enter is pressed"),
    ] = None,
    help_text: Annotated[
        str, typer.Option("--help-text", help="text revealed by the help key")
    ] = "",
    page_size: Annotated[
        int,
        typer.Option("--page-size", "-p", help="rows shown at once, 0 uses settings"),
    ] = 0,
):
    """choose one of OPTIONS with the arrow keys and print it"""
    cmd = PickCommand(ctx.obj["settings"])
    cmd.run(
        options=options,
        message=message,
        default=default,
        help_text=help_text,
        page_size=page_size,
    )


@app.command()
def demo(ctx: Context):
    """walk through two prompts over a long list of letters"""
    cmd = DemoCommand(ctx.obj["settings"])
    cmd.run()
