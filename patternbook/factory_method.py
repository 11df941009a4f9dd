"""Factory method pattern: factories that hand out game consoles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A product identified by its name."""

    name: str

    def describe(self) -> str:
        return self.name


PS5 = Product("PS5")
SWITCH2 = Product("Switch2")


class Factory(ABC):
    """Creates a product."""

    @abstractmethod
    def create_product(self) -> Product:
        """Return the factory's product."""


class PS5Factory(Factory):
    def create_product(self) -> Product:
        return PS5


class Switch2Factory(Factory):
    def create_product(self) -> Product:
        return SWITCH2


def main(argv=None) -> int:
    for factory in (PS5Factory(), Switch2Factory()):
        print(factory.create_product().describe())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())