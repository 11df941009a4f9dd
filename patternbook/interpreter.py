"""Interpreter pattern: a tree of integer additions and subtractions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


class Expression(ABC):
    """A node of an arithmetic expression tree."""

    @abstractmethod
    def interpret(self) -> int:
        """Evaluate the expression."""


@dataclass(frozen=True)
class Number(Expression):
    value: int

    def interpret(self) -> int:
        return self.value


@dataclass(frozen=True)
class _BinaryOperation(Expression):
    left: Expression
    right: Expression

    symbol: ClassVar[str] = "?"


class Add(_BinaryOperation):
    symbol = "+"

    def interpret(self) -> int:
        return self.left.interpret() + self.right.interpret()


class Subtract(_BinaryOperation):
    symbol = "-"

    def interpret(self) -> int:
        return self.left.interpret() - self.right.interpret()


def format_expression(expression: Expression) -> str:
    """Write an expression out in infix form, operators spaced."""
    if isinstance(expression, _BinaryOperation):
        left = format_expression(expression.left)
        right = format_expression(expression.right)
        return f"{left} {expression.symbol} {right}"
    if isinstance(expression, Number):
        return str(expression.value)
    raise TypeError(f"cannot format {type(expression).__name__}")


def main(argv=None) -> int:
    expression = Subtract(Add(Number(10), Number(6)), Number(8))
    print(f"{format_expression(expression)} = {expression.interpret()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())