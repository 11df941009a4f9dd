"""Template method pattern: recipes that share one cooking procedure."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Recipe(ABC):
    """A recipe made by preparing, cooking and serving, in that order."""

    def make(self) -> list[str]:
        return [self.prepare(), self.cook(), self.serve()]

    @abstractmethod
    def prepare(self) -> str:
        """Describe the preparation."""

    @abstractmethod
    def cook(self) -> str:
        """Describe the cooking."""

    @abstractmethod
    def serve(self) -> str:
        """Describe the serving."""


class RamenRecipe(Recipe):
    def prepare(self) -> str:
        return "鍋とラーメンを用意します。"

    def cook(self) -> str:
        return "鍋でラーメンを茹でます。"

    def serve(self) -> str:
        return "器にラーメンを盛り付けて完成！"


class UdonRecipe(Recipe):
    def prepare(self) -> str:
        return "鍋とうどんを用意します。"

    def cook(self) -> str:
        return "鍋でうどんを茹でます。"

    def serve(self) -> str:
        return "器にうどんを盛り付けて完成！"


def make_recipe(recipe: Recipe) -> list[str]:
    return recipe.make()


def main(argv=None) -> int:
    for recipe in (RamenRecipe(), UdonRecipe()):
        for step in make_recipe(recipe):
            print(step)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())