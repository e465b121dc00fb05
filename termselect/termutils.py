from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True, highlight=False)


def err_print(text: str) -> None:
    """prints text in red to stderr"""
    err_console.print(f"[bold red]error: {escape(text)}[/bold red]")
