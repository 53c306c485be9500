from typing import Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class Iterator(Generic[T]):
    """
    Iterator Pattern: single-pass cursor over a fixed sequence.

    The elements are copied into a tuple at construction, so later changes to the
    source list do not affect traversal. There is no reset; once exhausted,
    next() keeps returning None, while the built-in next(it) raises StopIteration.
    """

    def __init__(self, elements: Iterable[T]):
        self._elements: tuple[T, ...] = tuple(elements)
        self._current_index: int = 0

    @property
    def index(self) -> int:
        return self._current_index

    def has_next(self) -> bool:
        """
        :return: True if at least one element remains.
        """
        return self._current_index < len(self._elements)

    def next(self) -> Optional[T]:
        """
        Return the element under the cursor and advance.
        :return: The next element, or None once the sequence is exhausted.
        """
        if not self.has_next():
            return None
        element = self._elements[self._current_index]
        self._current_index += 1
        return element

    # Python iterator protocol; shares the cursor with next(), so a for-loop consumes it
    def __iter__(self) -> "Iterator[T]":
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()
