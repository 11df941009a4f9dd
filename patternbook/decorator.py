"""Decorator pattern: characters wrapped around a string, layer by layer."""

from __future__ import annotations

from typing import Optional


class Decorator:
    """Wraps text in a character, after letting an inner decorator wrap it first."""

    def __init__(self, char: str, component: Optional["Decorator"] = None) -> None:
        if len(char) != 1:
            raise ValueError(f"decoration must be a single character, got {char!r}")
        self.char = char
        self.component = component

    def decorate(self, text: str) -> str:
        """Return ``text`` wrapped by every layer, innermost first."""
        base = self.component.decorate(text) if self.component is not None else text
        return f"{self.char}{base}{self.char}"


def main(argv=None) -> int:
    decorator = Decorator("'", Decorator("*", Decorator("+", Decorator("."))))
    print(decorator.decorate("Hello"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())