"""Command pattern: a remote control with undo and redo history."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

HISTORY_SIZE = 8


class Command(ABC):
    """An action that can be carried out and taken back."""

    @abstractmethod
    def execute(self) -> str:
        """Carry out the action and describe it."""

    @abstractmethod
    def undo(self) -> str:
        """Take the action back and describe it."""


class LightOnCommand(Command):
    def execute(self) -> str:
        return "Light ON"

    def undo(self) -> str:
        return "UNDO: Light ON"


class LightDimCommand(Command):
    def execute(self) -> str:
        return "Light DIM"

    def undo(self) -> str:
        return "UNDO: Light DIM"


class LightOffCommand(Command):
    def execute(self) -> str:
        return "Light OFF"

    def undo(self) -> str:
        return "UNDO: Light Off"


class RemoteController:
    """Runs the current command and keeps a bounded history of what ran."""

    def __init__(self, command: Command, history_size: int = HISTORY_SIZE) -> None:
        if history_size < 1:
            raise ValueError("history size must be at least 1")
        self.current_command = command
        self.history_size = history_size
        self._history: list[Command] = []
        self._index = -1

    @property
    def history(self) -> tuple[Command, ...]:
        return tuple(self._history)

    @property
    def position(self) -> int:
        """Index of the last executed command, -1 when everything is undone."""
        return self._index

    def set_command(self, command: Command) -> None:
        self.current_command = command

    def press_button(self) -> Optional[str]:
        """Run the current command; return None when the history is full."""
        del self._history[self._index + 1 :]
        if len(self._history) >= self.history_size:
            return None
        self._history.append(self.current_command)
        self._index += 1
        return self.current_command.execute()

    def undo(self) -> str:
        if self._index == -1:
            return "Nothing to undo"
        message = self._history[self._index].undo()
        self._index -= 1
        return message

    def redo(self) -> str:
        if self._index + 1 >= len(self._history):
            return "Nothing to redo"
        self._index += 1
        return "REDO: " + self._history[self._index].execute()


def main(argv=None) -> int:
    remote = RemoteController(LightOnCommand())
    outputs = [remote.press_button()]
    remote.set_command(LightDimCommand())
    outputs.append(remote.press_button())
    remote.set_command(LightOffCommand())
    outputs.append(remote.press_button())
    outputs.extend(remote.undo() for _ in range(3))
    outputs.extend(remote.redo() for _ in range(3))
    for line in outputs:
        if line is not None:
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())