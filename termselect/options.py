from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from .errors import ConfigurationError

Labeler = Callable[[Any], str]


@dataclass(frozen=True)
class Choice:
    """one selectable item, reduced to the label shown in the list"""

    value: Any
    label: str
    plain: bool = False

    @classmethod
    def from_label(cls, label: str) -> "Choice":
        """a plain choice whose value is its own label"""
        return cls(value=label, label=label, plain=True)

    @classmethod
    def from_value(cls, value: Any, labeler: Labeler = str) -> "Choice":
        """wraps an arbitrary value, the label comes from the labeler"""
        if isinstance(value, Choice):
            return value
        return cls(value=value, label=labeler(value))

    @property
    def answer(self) -> Any:
        """what the prompt hands back when this choice is picked"""
        return self.label if self.plain else self.value

    def matches(self, other: "Choice") -> bool:
        # defaults are matched by label, never by identity
        return self.label == other.label

    def __str__(self) -> str:
        return self.label


def normalize(
    labels: Iterable[str] | None = None,
    items: Iterable[Any] | None = None,
    default_label: str | None = None,
    default_item: Any = None,
    labeler: Labeler = str,
) -> tuple[tuple[Choice, ...], Choice | None]:
    """
    resolves both accepted option shapes into one ordered tuple of choices
    arbitrary items win over plain labels, they are never merged
    """
    arbitrary = [Choice.from_value(item, labeler) for item in items or ()]
    if arbitrary:
        options = tuple(arbitrary)
    else:
        options = tuple(Choice.from_label(label) for label in labels or ())

    if not options:
        raise ConfigurationError("please provide options to select from")

    default: Choice | None = None
    if default_item is not None:
        default = Choice.from_value(default_item, labeler)
    elif default_label and arbitrary:
        # an items prompt only answers with items, the label picks one of them
        default = next((c for c in options if c.label == default_label), None)
    elif default_label:
        default = Choice.from_label(default_label)

    return options, default


def find_default_index(options: Sequence[Choice], default: Choice | None) -> int:
    """index of the first option carrying the default's label, or 0"""
    if default is None:
        return 0
    for i, option in enumerate(options):
        if option.matches(default):
            return i
    return 0
