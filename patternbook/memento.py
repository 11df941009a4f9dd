"""Memento pattern: saving a player's state and restoring it later."""

from __future__ import annotations

from dataclasses import dataclass

CARETAKER_CAPACITY = 8


@dataclass(frozen=True)
class PlayerMemento:
    """A snapshot of a player's name and level."""

    name: str
    level: int


@dataclass
class Player:
    """A player with a name and a level."""

    name: str
    level: int

    def show_status(self) -> str:
        return f"name = {self.name}, level = {self.level}"

    def create_memento(self) -> PlayerMemento:
        """Capture the current state."""
        return PlayerMemento(self.name, self.level)

    def restore_memento(self, memento: PlayerMemento) -> "Player":
        """Return to a captured state."""
        self.name = memento.name
        self.level = memento.level
        return self


class Caretaker:
    """Keeps a bounded list of mementos without looking inside them."""

    def __init__(self, capacity: int = CARETAKER_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._mementos: list[PlayerMemento] = []

    def __len__(self) -> int:
        return len(self._mementos)

    def add_memento(self, memento: PlayerMemento) -> None:
        if len(self._mementos) >= self.capacity:
            raise OverflowError(f"caretaker is full ({self.capacity} mementos)")
        self._mementos.append(memento)

    def get_memento(self, index: int) -> PlayerMemento:
        if not 0 <= index < len(self._mementos):
            raise IndexError(f"no memento at index {index}")
        return self._mementos[index]


def main(argv=None) -> int:
    caretaker = Caretaker()
    alice = Player("Alice", 10)
    print(alice.show_status())

    caretaker.add_memento(alice.create_memento())

    alice.level = 20
    print(alice.show_status())

    alice.restore_memento(caretaker.get_memento(0))
    print(alice.show_status())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())