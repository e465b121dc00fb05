import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from rich.console import Console
from rich.control import Control
from rich.markup import escape
from rich.segment import ControlType
from rich.text import Text

from .paginate import PageView
from .state import SelectionState

if TYPE_CHECKING:
    from .select import Select

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderFrame:
    """everything the template needs to draw one frame, never mutated"""

    message: str
    help: str = ""
    page_entries: tuple[str, ...] = ()
    selected_index: int = 0
    show_help: bool = False
    answer: str = ""
    show_answer: bool = False
    help_rune: str = "?"
    question_icon: str = "?"
    help_icon: str = "?"
    select_focus_icon: str = ">"


Template = Callable[[RenderFrame], str]


def _frame_base(select: "Select") -> dict:
    settings = select.settings
    return {
        "message": select.message,
        "help": select.help,
        "help_rune": settings.help_input_rune,
        "question_icon": settings.question_icon,
        "help_icon": settings.help_icon,
        "select_focus_icon": settings.select_focus_icon,
    }


def build_frame(
    select: "Select", state: SelectionState, page: PageView
) -> RenderFrame:
    """projects the running interaction onto the interactive frame"""
    return RenderFrame(
        **_frame_base(select),
        page_entries=tuple(choice.label for choice in page.entries),
        selected_index=page.selected_index,
        show_help=state.showing_help,
    )


def build_answer_frame(select: "Select", answer: str) -> RenderFrame:
    """the final frame, message and answer only"""
    return RenderFrame(**_frame_base(select), answer=answer, show_answer=True)


def select_question_template(frame: RenderFrame) -> str:
    """turns a frame into rich markup, one line per row, trailing newline"""
    out = []
    if frame.show_help:
        out.append(f"[cyan]{escape(frame.help_icon)} {escape(frame.help)}[/cyan]\n")
    out.append(f"[bold green]{escape(frame.question_icon)} [/bold green]")
    out.append(f"[bold]{escape(frame.message)}[/bold]")

    if frame.show_answer:
        out.append(f" [cyan]{escape(frame.answer)}[/cyan]\n")
        return "".join(out)

    if frame.help and not frame.show_help:
        out.append(f" [cyan]{escape(f'[{frame.help_rune} for help]')}[/cyan]")
    out.append("\n")

    for ix, choice in enumerate(frame.page_entries):
        if ix == frame.selected_index:
            focus = escape(frame.select_focus_icon)
            out.append(f"[bold cyan]{focus} {escape(choice)}[/bold cyan]\n")
        else:
            out.append(f"  {escape(choice)}\n")
    return "".join(out)


class Renderer:
    """
    draws frames in place: every render first erases the lines the previous
    render wrote, so the prompt never scrolls while the user navigates
    """

    def __init__(self, console: Console | None = None):
        self.console = console if console is not None else Console(highlight=False)
        self._line_count = 0

    def _erase(self) -> None:
        if not self._line_count:
            return
        controls = [Control.move_to_column(0)]
        for _ in range(self._line_count):
            controls.append(Control((ControlType.CURSOR_UP, 1)))
            controls.append(Control((ControlType.ERASE_IN_LINE, 2)))
        self.console.control(*controls)
        self._line_count = 0

    def render(self, template: Template, frame: RenderFrame) -> None:
        text = Text.from_markup(template(frame).rstrip("\n"), emoji=False)
        self._erase()
        self.console.print(text)
        self._line_count = len(text.wrap(self.console, self.console.width))

    def hide_cursor(self) -> None:
        try:
            self.console.show_cursor(False)
        except OSError as e:
            logger.debug("could not hide cursor: %s", e)

    def show_cursor(self) -> None:
        try:
            self.console.show_cursor(True)
        except OSError as e:
            logger.debug("could not show cursor: %s", e)
