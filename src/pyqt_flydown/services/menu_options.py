"""
Context-menu option model and an in-place ordered-list wrapper.

The option list belongs to the editor; MenuOptionList only names the two
edits the augmenter needs so their first-match semantics are explicit.
"""

from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, TypeVar


def _noop() -> None:
    pass


@dataclass
class MenuOption:
    """One block context-menu entry."""
    text: str
    enabled: bool = True
    callback: Callable[[], None] = field(default=_noop, repr=False)


def has_label(label: str) -> Callable[[MenuOption], bool]:
    """Predicate matching options whose text equals ``label``."""
    return lambda option: option.text == label


T = TypeVar("T")


class MenuOptionList(Generic[T]):
    """
    Ordered list view with first-match insert/remove.

    Mutates the wrapped list in place; callers keep their own reference.
    """

    def __init__(self, items: List[T]):
        self._items = items

    def index_of(self, predicate: Callable[[T], bool]) -> int:
        """Index of the first item matching predicate, or -1."""
        for index, item in enumerate(self._items):
            if predicate(item):
                return index
        return -1

    def insert_before(self, predicate: Callable[[T], bool], item: T) -> bool:
        """
        Insert item before the first match.

        Returns:
            True if inserted, False if nothing matched (list untouched)
        """
        index = self.index_of(predicate)
        if index < 0:
            return False
        self._items.insert(index, item)
        return True

    def remove_first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Remove and return the first match, or None if nothing matched."""
        index = self.index_of(predicate)
        if index < 0:
            return None
        return self._items.pop(index)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)
