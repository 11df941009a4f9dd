"""Visitor pattern: a doctor examining different kinds of people."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Visitor:
    """A named visitor with a different examination for each kind of person."""

    def __init__(self, name: str) -> None:
        self.name = name

    def visit_student(self, student: "Student") -> str:
        return f"{self.name} は {student.name} の健康診断をした"

    def visit_older(self, older: "Older") -> str:
        return f"{self.name} は {older.name} の血圧を測定した"

    def visit_younger(self, younger: "Younger") -> str:
        return f"{self.name} は {younger.name} の身体検査をした"


@dataclass
class Person(ABC):
    """Someone who lets a visitor examine them."""

    name: str

    @abstractmethod
    def accept(self, visitor: Visitor) -> str:
        """Hand this person to the matching visit method."""


class Student(Person):
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_student(self)


class Older(Person):
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_older(self)


class Younger(Person):
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_younger(self)


def main(argv=None) -> int:
    doctor = Visitor("お医者さん")
    for person in (Student("学生"), Older("高齢者"), Younger("若者")):
        print(person.accept(doctor))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())