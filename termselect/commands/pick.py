from ..select import Select, ask_one
from .base import CommandBase


class PickCommand(CommandBase):
    def execute(
        self,
        options: list[str],
        message: str = "choose an option:",
        default: str | None = None,
        help_text: str = "",
        page_size: int = 0,
    ):
        """ask for one of the given options and print the answer"""
        prompt = Select(
            message=message,
            options=options,
            default=default,
            help=help_text,
            page_size=page_size,
            settings=self.settings,
            renderer=self.renderer(),
        )
        answer = ask_one(prompt)
        self.console.print(answer, markup=False, highlight=False)
        return answer
