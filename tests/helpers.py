import io
import string

from rich.console import Console

from termselect.render import Renderer
from termselect.terminal import (
    KEY_ARROW_DOWN,
    KEY_ARROW_UP,
    KEY_ENTER,
    RuneReader,
)

LETTERS = list(string.ascii_lowercase[:10])
UP = KEY_ARROW_UP
DOWN = KEY_ARROW_DOWN
ENTER = KEY_ENTER


class ScriptedReader(RuneReader):
    """replays a fixed list of keys and records terminal mode changes"""

    def __init__(self, keys):
        super().__init__(io.BytesIO())
        self.keys = list(keys)
        self.events: list[str] = []

    def set_term_mode(self) -> None:
        self.events.append("raw")

    def restore_term_mode(self) -> None:
        self.events.append("restore")

    def read_rune(self) -> tuple[str, int]:
        if not self.keys:
            raise EOFError("input stream closed")
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key, len(key.encode("utf-8"))


class RecordingRenderer(Renderer):
    """keeps every frame it was asked to draw"""

    def __init__(self):
        super().__init__(
            Console(
                file=io.StringIO(), force_terminal=False, color_system=None, width=60
            )
        )
        self.frames = []
        self.cursor: list[str] = []

    def render(self, template, frame) -> None:
        self.frames.append(frame)
        super().render(template, frame)

    def hide_cursor(self) -> None:
        self.cursor.append("hide")

    def show_cursor(self) -> None:
        self.cursor.append("show")

    @property
    def output(self) -> str:
        return self.console.file.getvalue()


