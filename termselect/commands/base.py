from abc import ABC, abstractmethod

import typer
from rich.console import Console

from ..config import Settings
from ..errors import InterruptError
from ..render import Renderer
from ..termutils import err_print

console = Console()


class CommandBase(ABC):
    """
    an abstract base class for commands
    """

    def __init__(
        self,
        settings: Settings,
        console: Console = console,
        prompt_console: Console | None = None,
    ):
        self.settings = settings
        self.console = console
        # prompts draw on stderr so stdout carries only the answers
        self.prompt_console = (
            prompt_console
            if prompt_console is not None
            else Console(stderr=True, highlight=False)
        )

    def renderer(self) -> Renderer:
        """a fresh renderer, one per prompt so frames never erase each other"""
        return Renderer(self.prompt_console)

    def run(self, *args, **kwargs):
        """
        method called by typer. wraps the command logic in a generic error handler
        """
        try:
            return self.execute(*args, **kwargs)
        except typer.Abort:
            # re-raise abort exceptions to let typer handle them
            raise
        except InterruptError as e:
            err_print("operation cancelled")
            raise typer.Abort() from e
        except Exception as e:
            err_print(f"an unexpected error occurred: {e}")
            raise typer.Abort() from e

    @abstractmethod
    def execute(self, *args, **kwargs):
        """
        the main entry method for the cmd logic
        """
        ...
