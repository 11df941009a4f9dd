"""State pattern: a person whose behaviour follows their condition."""

from __future__ import annotations

from enum import Enum, auto


class StateKind(Enum):
    FINE = auto()
    POISON = auto()
    DEAD = auto()


_NEXT_STATE = {
    StateKind.FINE: StateKind.POISON,
    StateKind.POISON: StateKind.DEAD,
    StateKind.DEAD: StateKind.FINE,
}


class Human:
    """A person who acts according to the current state and then moves on."""

    def __init__(self, name: str, state: StateKind = StateKind.FINE) -> None:
        self.name = name
        self.state = state

    def _message(self) -> str:
        if self.state is StateKind.FINE:
            return f"{self.name} is fine!"
        if self.state is StateKind.POISON:
            return f"{self.name} is poison..."
        return "..."

    def action(self) -> str:
        """Describe the current state and advance to the next one."""
        message = self._message()
        self.change_state(_NEXT_STATE[self.state])
        return message

    def change_state(self, state: StateKind) -> "Human":
        self.state = state
        return self


def main(argv=None) -> int:
    human = Human("Takeshi")
    for _ in range(3):
        print(human.action())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())