"""
the single choice select prompt

    prompt = Select(message="choose a color:", options=["red", "blue", "green"])
    color = ask_one(prompt)
"""

import logging
from typing import Any, Iterable

from . import config
from .errors import InterruptError
from .options import Choice, Labeler, normalize
from .paginate import PageView, paginate
from .render import (
    Renderer,
    Template,
    build_answer_frame,
    build_frame,
    select_question_template,
)
from .state import Phase, SelectionState
from .terminal import RuneReader

logger = logging.getLogger(__name__)


class Select:
    """
    presents a list of options, the user moves with the arrow keys and
    confirms with enter

    `options` takes plain labels, `items` takes arbitrary values labeled by
    `labeler`; when both are given only `items` is used. the configuration
    is fixed once built, every ask runs on its own fresh selection state
    """

    def __init__(
        self,
        message: str,
        options: Iterable[str] | None = None,
        default: str | None = None,
        items: Iterable[Any] | None = None,
        default_item: Any = None,
        labeler: Labeler = str,
        help: str = "",
        page_size: int = 0,
        settings: config.Settings | None = None,
        renderer: Renderer | None = None,
        reader: RuneReader | None = None,
        template: Template = select_question_template,
    ):
        self.message = message
        self.help = help
        self.settings = settings if settings is not None else config.Settings()
        self.page_size = page_size if page_size > 0 else self.settings.page_size
        self.choices, self.default = normalize(
            labels=options,
            items=items,
            default_label=default,
            default_item=default_item,
            labeler=labeler,
        )
        self.renderer = renderer if renderer is not None else Renderer()
        self.reader = reader if reader is not None else RuneReader()
        self.labeler = labeler
        self.template = template

    def page(self, state: SelectionState) -> PageView[Choice]:
        return paginate(self.page_size, self.choices, state.selected_index)

    def _render(self, state: SelectionState) -> None:
        self.renderer.render(
            self.template, build_frame(self, state, self.page(state))
        )

    def new_state(self) -> SelectionState:
        return SelectionState.start(
            self.choices,
            default=self.default,
            help_rune=self.settings.help_input_rune if self.help else None,
        )

    def ask(self) -> Any:
        """
        runs one interaction and returns the answer: the label for plain
        options, the value itself for items
        raises InterruptError on ctrl+c, read errors propagate unchanged
        """
        state = self.new_state()
        logger.debug(
            "asking %r with %d options, initial index %d",
            self.message,
            len(self.choices),
            state.selected_index,
        )
        self._render(state)

        self.renderer.hide_cursor()
        try:
            with self.reader.term_mode():
                while True:
                    key, _ = self.reader.read_rune()
                    phase = state.apply(key)
                    if phase is Phase.CANCELLED:
                        raise InterruptError()
                    if phase is Phase.CONFIRMED:
                        break
                    self._render(state)
        finally:
            self.renderer.show_cursor()

        choice = state.resolve()
        logger.debug("answered %r", choice.label)
        return choice.answer

    def cleanup(self, answer: Any) -> None:
        """replaces the interactive frame with the answered one"""
        self.renderer.render(
            self.template, build_answer_frame(self, self._label_for(answer))
        )

    def _label_for(self, answer: Any) -> str:
        if isinstance(answer, Choice):
            return answer.label
        for choice in (*self.choices, self.default):
            if choice is not None and choice.answer is answer:
                return choice.label
        return answer if isinstance(answer, str) else self.labeler(answer)


def ask_one(select: Select) -> Any:
    """asks the prompt once and leaves the answered frame on screen"""
    answer = select.ask()
    select.cleanup(answer)
    return answer
