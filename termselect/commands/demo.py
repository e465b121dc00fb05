import string
from dataclasses import dataclass

from ..select import Select, ask_one
from .base import CommandBase

LETTERS = list(string.ascii_lowercase[:10])


@dataclass(frozen=True)
class Letter:
    """a value that is not a string, labeled through its `s` field"""

    s: str

    def __str__(self) -> str:
        return self.s


class DemoCommand(CommandBase):
    def execute(self):
        """walks through a struct backed and a plain string select of a long list"""
        struct_prompt = Select(
            message="choose a letter for struct:",
            items=[Letter(letter) for letter in LETTERS],
            settings=self.settings,
            renderer=self.renderer(),
        )
        letter_prompt = Select(
            message="choose a letter for string:",
            options=LETTERS,
            help="the list scrolls, keep pressing the arrow keys",
            settings=self.settings,
            renderer=self.renderer(),
        )

        struct_answer = ask_one(struct_prompt)
        letter_answer = ask_one(letter_prompt)

        self.console.print(f"you chose {struct_answer}.")
        self.console.print(f"you chose {letter_answer}.")
        return struct_answer, letter_answer
