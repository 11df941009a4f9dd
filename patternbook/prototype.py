"""Prototype pattern: users that produce independent copies of themselves."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass
class User:
    """A user with a name and an age."""

    name: str
    age: int

    def clone(self) -> "User":
        """Return a new user with the same name and age."""
        return dataclasses.replace(self)


def main(argv=None) -> int:
    user1 = User("Alice", 23)
    user2 = user1.clone()
    print(f"user1: ({user1.name}, {user1.age})")
    print(f"user2: ({user2.name}, {user2.age})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())