"""Iterator pattern: a bounded collection walked by a shared cursor."""

from __future__ import annotations

import random
from typing import Any, Iterable as _IterableType

N = 10


class Iterable:
    """A bounded sequence that iterates itself with one cursor.

    Adding keeps at most ``max_length - 1`` items; assigning may fill it completely.
    """

    def __init__(self, max_length: int) -> None:
        if max_length < 0:
            raise ValueError("max_length must not be negative")
        self.max_length = max_length
        self._items: list[Any] = []
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._items)

    def add(self, value: Any) -> bool:
        """Append a value if there is room; return whether it was kept."""
        if len(self._items) + 1 < self.max_length:
            self._items.append(value)
            return True
        return False

    def assign(self, values: _IterableType[Any]) -> None:
        """Replace the contents with ``values``."""
        items = list(values)
        if len(items) > self.max_length:
            raise ValueError(
                f"{len(items)} values do not fit in a capacity of {self.max_length}"
            )
        self._items = items

    def has_next(self) -> bool:
        return self._cursor < len(self._items)

    def __iter__(self) -> "Iterable":
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        value = self._items[self._cursor]
        self._cursor += 1
        return value


def main(argv=None) -> int:
    numbers = Iterable(N * 2)
    for _ in range(N):
        numbers.add(random.randrange(1024))
    for value in numbers:
        print(value)

    words = Iterable(N)
    words.assign(["Hello", "World"])
    for word in words:
        print(word)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())