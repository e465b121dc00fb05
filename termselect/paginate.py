from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageView(Generic[T]):
    """the visible slice of the option list and where the cursor sits in it"""

    entries: tuple[T, ...]
    selected_index: int
    start: int = 0

    @property
    def selected(self) -> T:
        return self.entries[self.selected_index]

    def __len__(self) -> int:
        return len(self.entries)


def paginate(page_size: int, items: Sequence[T], selected_index: int) -> PageView[T]:
    """
    returns a window of page_size items that always contains the selected one
    the selection is kept centered, except near either end of the list where
    the window is clamped so it never runs off
    """
    total = len(items)
    if not 0 <= selected_index < total:
        raise IndexError(
            f"selected index {selected_index} out of range for {total} items"
        )

    if page_size <= 0 or page_size >= total:
        return PageView(tuple(items), selected_index, 0)

    start = selected_index - page_size // 2
    start = max(0, min(start, total - page_size))
    return PageView(
        tuple(items[start : start + page_size]), selected_index - start, start
    )
