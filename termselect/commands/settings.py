from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typer import Context

from .. import config

app = typer.Typer(invoke_without_command=True)
console = Console()


def _show_settings():
    """loads and displays current settings"""
    settings = config.load_config()
    table = Table("setting", "value")
    for name, value in settings.model_dump().items():
        table.add_row(name, escape(str(value)))
    console.print(table)


def _update(**changes) -> None:
    settings = config.load_config()
    try:
        updated = config.Settings(**{**settings.model_dump(), **changes})
    except ValidationError as e:
        errors = "; ".join(err["msg"] for err in e.errors())
        console.print(f"[red]error: {escape(errors)}[/red]")
        raise typer.Abort() from e
    config.save_config(updated)
    for name, value in changes.items():
        console.print(f"{name} set to: {escape(str(value))}")


@app.callback(invoke_without_command=True)
def main(ctx: Context):
    """manage prompt settings"""
    if ctx.invoked_subcommand is None:
        _show_settings()


@app.command()
def show():
    """show current settings"""
    _show_settings()


@app.command("page-size")
def page_size(
    size: Annotated[
        int, typer.Argument(help="rows shown at once when a prompt uses 0")
    ],
):
    """set the default page size"""
    _update(page_size=size)


@app.command("help-rune")
def help_rune(
    rune: Annotated[str, typer.Argument(help="the key that reveals a prompt's help")],
):
    """set the key that shows the help text"""
    _update(help_input_rune=rune)


@app.command()
def reset():
    """restore the default settings"""
    config.save_config(config.Settings())
    console.print("settings restored to defaults")
