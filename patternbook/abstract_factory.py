"""Abstract factory pattern: menus that produce matching dishes and drinks."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MainDish(ABC):
    """A main dish that can be served."""

    @abstractmethod
    def serve(self) -> str:
        """Return the line describing the served dish."""


class Rice(MainDish):
    def serve(self) -> str:
        return "・ごはん"


class Hamburger(MainDish):
    def serve(self) -> str:
        return "・ハンバーガー"


class Drink(ABC):
    """A drink that can be served."""

    @abstractmethod
    def serve(self) -> str:
        """Return the line describing the served drink."""


class GreenTea(Drink):
    def serve(self) -> str:
        return "・緑茶"


class Coke(Drink):
    def serve(self) -> str:
        return "・コーラ"


class MenuFactory(ABC):
    """Creates a main dish and a drink that belong together."""

    @abstractmethod
    def create_main_dish(self) -> MainDish:
        """Create the menu's main dish."""

    @abstractmethod
    def create_drink(self) -> Drink:
        """Create the menu's drink."""


class JapaneseMenuFactory(MenuFactory):
    def create_main_dish(self) -> MainDish:
        return Rice()

    def create_drink(self) -> Drink:
        return GreenTea()


class AmericanMenuFactory(MenuFactory):
    def create_main_dish(self) -> MainDish:
        return Hamburger()

    def create_drink(self) -> Drink:
        return Coke()


def serve_menu(factory: MenuFactory) -> list[str]:
    """Serve the main dish and then the drink of a menu."""
    main_dish = factory.create_main_dish()
    drink = factory.create_drink()
    return [main_dish.serve(), drink.serve()]


def main(argv=None) -> int:
    for title, factory in (
        ("<Japanese Menu>", JapaneseMenuFactory()),
        ("<American Menu>", AmericanMenuFactory()),
    ):
        print(title)
        for line in serve_menu(factory):
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())