"""A sequence with a movable cursor that can point at one of its elements."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class ListError(IndexError):
    """Raised when a list operation is called without its precondition."""


class CursorList(Generic[T]):
    """An ordered sequence with an optional cursor.

    The cursor either sits under one element, whose position is given by
    :meth:`index`, or is undefined, in which case :meth:`index` is -1.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._index = -1

    # Access ---------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CursorList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        """Each element followed by a single space, front first."""
        return "".join(f"{item} " for item in self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, index={self._index})"

    def index(self) -> int:
        """Position of the cursor element, or -1 if the cursor is undefined."""
        return self._index

    def front(self) -> T:
        """The first element."""
        self._require_nonempty("front")
        return self._items[0]

    def back(self) -> T:
        """The last element."""
        self._require_nonempty("back")
        return self._items[-1]

    def cursor(self) -> T:
        """The element under the cursor."""
        self._require_cursor("cursor")
        return self._items[self._index]

    # Manipulation ---------------------------------------------------------

    def clear(self) -> None:
        """Remove every element and leave the cursor undefined."""
        self._items.clear()
        self._index = -1

    def set(self, x: T) -> None:
        """Overwrite the element under the cursor with ``x``."""
        self._require_cursor("set")
        self._items[self._index] = x

    def move_front(self) -> None:
        """Put the cursor under the front element; no effect when empty."""
        if self._items:
            self._index = 0

    def move_back(self) -> None:
        """Put the cursor under the back element; no effect when empty."""
        if self._items:
            self._index = len(self._items) - 1

    def move_prev(self) -> None:
        """Step the cursor toward the front, falling off it at the front."""
        if self._index >= 0:
            self._index -= 1

    def move_next(self) -> None:
        """Step the cursor toward the back, falling off it at the back."""
        if self._index >= 0:
            if self._index < len(self._items) - 1:
                self._index += 1
            else:
                self._index = -1

    def prepend(self, x: T) -> None:
        """Insert ``x`` before the front element."""
        self._items.insert(0, x)
        if self._index != -1:
            self._index += 1

    def append(self, x: T) -> None:
        """Insert ``x`` after the back element."""
        self._items.append(x)

    def insert_before(self, x: T) -> None:
        """Insert ``x`` just before the cursor element."""
        self._require_cursor("insert_before")
        self._items.insert(self._index, x)
        self._index += 1

    def insert_after(self, x: T) -> None:
        """Insert ``x`` just after the cursor element."""
        self._require_cursor("insert_after")
        self._items.insert(self._index + 1, x)

    def delete_front(self) -> None:
        """Remove the front element."""
        self._require_nonempty("delete_front")
        del self._items[0]
        if self._index != -1:
            self._index -= 1

    def delete_back(self) -> None:
        """Remove the back element."""
        self._require_nonempty("delete_back")
        self._items.pop()
        if self._index == len(self._items):
            self._index = -1

    def delete(self) -> None:
        """Remove the cursor element, leaving the cursor undefined."""
        self._require_cursor("delete")
        del self._items[self._index]
        self._index = -1

    # Other ----------------------------------------------------------------

    def copy(self) -> CursorList[T]:
        """A new list with the same elements and an undefined cursor."""
        return CursorList(self._items)

    def _require_nonempty(self, operation: str) -> None:
        if not self._items:
            raise ListError(f"calling {operation}() on an empty List")

    def _require_cursor(self, operation: str) -> None:
        self._require_nonempty(operation)
        if self._index < 0:
            raise ListError(f"calling {operation}() with the cursor undefined")