import codecs
import io
import logging
import os
import sys
import termios
import tty
from contextlib import contextmanager
from typing import IO, Iterator

logger = logging.getLogger(__name__)

# reserved key codes, arrow keys share their codes with the emacs bindings
# (ctrl+p / ctrl+n) so both navigate the same way
KEY_ARROW_LEFT = "\x02"
KEY_ARROW_RIGHT = "\x06"
KEY_ARROW_UP = "\x10"
KEY_ARROW_DOWN = "\x0e"
KEY_INTERRUPT = "\x03"
KEY_END_TRANSMISSION = "\x04"
KEY_ESCAPE = "\x1b"
KEY_ENTER = "\r"
KEY_NEWLINE = "\n"

_ESCAPE_SEQUENCES = {
    "A": KEY_ARROW_UP,
    "B": KEY_ARROW_DOWN,
    "C": KEY_ARROW_RIGHT,
    "D": KEY_ARROW_LEFT,
}


class RuneReader:
    """reads one key at a time from a terminal (or any byte stream)"""

    def __init__(self, stream: IO | None = None):
        self.stream = stream if stream is not None else sys.stdin
        self._saved_mode: list | None = None

    def _fileno(self) -> int | None:
        try:
            return self.stream.fileno()
        except (AttributeError, io.UnsupportedOperation):
            return None

    def _is_terminal(self) -> bool:
        fd = self._fileno()
        return fd is not None and os.isatty(fd)

    def set_term_mode(self) -> None:
        """switches the terminal to cbreak without echo or signal keys"""
        if not self._is_terminal():
            logger.debug("input is not a terminal, keeping its mode as is")
            return
        fd = self._fileno()
        self._saved_mode = termios.tcgetattr(fd)
        mode = termios.tcgetattr(fd)
        # ctrl+c must arrive as a key, not as SIGINT
        mode[tty.LFLAG] &= ~(
            termios.ECHO | termios.ECHONL | termios.ICANON | termios.ISIG
        )
        mode[tty.CC][termios.VMIN] = 1
        mode[tty.CC][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSAFLUSH, mode)
        logger.debug("terminal switched to raw key mode")

    def restore_term_mode(self) -> None:
        """puts the terminal back the way set_term_mode found it"""
        if self._saved_mode is None:
            return
        termios.tcsetattr(self._fileno(), termios.TCSADRAIN, self._saved_mode)
        self._saved_mode = None
        logger.debug("terminal mode restored")

    @contextmanager
    def term_mode(self) -> Iterator["RuneReader"]:
        """raw key mode for the duration of the block, restored on every exit"""
        self.set_term_mode()
        try:
            yield self
        finally:
            self.restore_term_mode()

    def _read_byte(self) -> bytes:
        fd = self._fileno()
        if fd is not None:
            return os.read(fd, 1)
        data = self.stream.read(1)
        if isinstance(data, str):
            return data.encode("utf-8")
        return data

    def _read_char(self) -> tuple[str, int]:
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        size = 0
        while True:
            byte = self._read_byte()
            if not byte:
                raise EOFError("input stream closed")
            size += len(byte)
            char = decoder.decode(byte)
            if char:
                return char, size

    def read_rune(self) -> tuple[str, int]:
        """
        blocks until one key is available and returns it with its byte length
        arrow key escape sequences are folded into the reserved KEY_ARROW_* codes
        """
        char, size = self._read_char()
        if char != KEY_ESCAPE:
            return char, size

        # repeated escapes collapse into the sequence that follows them
        while char == KEY_ESCAPE:
            char, extra = self._read_char()
            size += extra
        if char not in ("[", "O"):
            return char, size

        # parameters such as "1;5" run up to the final byte of the sequence
        char, extra = self._read_char()
        size += extra
        while not "\x40" <= char <= "\x7e":
            char, extra = self._read_char()
            size += extra
        return _ESCAPE_SEQUENCES.get(char, char), size
