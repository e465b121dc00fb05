import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .options import Choice, find_default_index
from .terminal import (
    KEY_ARROW_DOWN,
    KEY_ARROW_UP,
    KEY_END_TRANSMISSION,
    KEY_ENTER,
    KEY_INTERRUPT,
    KEY_NEWLINE,
)

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    AWAITING_INPUT = "awaiting_input"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

    @property
    def finished(self) -> bool:
        return self in (Phase.CONFIRMED, Phase.CANCELLED)


@dataclass
class SelectionState:
    """
    the mutable side of one interaction, built fresh for every ask
    never shared between two runs of the same prompt
    """

    options: Sequence[Choice]
    default: Choice | None = None
    help_rune: str | None = None
    selected_index: int = 0
    use_default: bool = True
    showing_help: bool = False
    phase: Phase = Phase.IDLE

    @classmethod
    def start(
        cls,
        options: Sequence[Choice],
        default: Choice | None = None,
        help_rune: str | None = None,
    ) -> "SelectionState":
        """resolves the initial selection from the default and awaits input"""
        state = cls(
            options=options,
            default=default,
            help_rune=help_rune,
            selected_index=find_default_index(options, default),
        )
        state.phase = Phase.AWAITING_INPUT
        return state

    def _move(self, step: int) -> None:
        self.use_default = False
        self.selected_index = (self.selected_index + step) % len(self.options)

    def apply(self, key: str) -> Phase:
        """feeds one key into the machine and returns the phase it ends up in"""
        if self.phase.finished:
            raise RuntimeError(f"interaction already {self.phase.value}")

        if key in (KEY_ENTER, KEY_NEWLINE, KEY_END_TRANSMISSION):
            self.phase = Phase.CONFIRMED
        elif key == KEY_INTERRUPT:
            self.phase = Phase.CANCELLED
        elif key == KEY_ARROW_UP:
            self._move(-1)
        elif key == KEY_ARROW_DOWN:
            self._move(1)
        elif self.help_rune and key == self.help_rune:
            self.showing_help = True

        logger.debug(
            "key %r -> phase=%s index=%d use_default=%s",
            key,
            self.phase.value,
            self.selected_index,
            self.use_default,
        )
        return self.phase

    def resolve(self) -> Choice:
        """the choice enter hands back, an untouched enter honors the default"""
        if self.use_default:
            return self.default if self.default is not None else self.options[0]
        return self.options[self.selected_index]
