"""Mediator pattern: users talking to each other through a chat room."""

from __future__ import annotations

MAX_USERS = 32


class ChatRoom:
    """Relays each message to every member except the sender."""

    def __init__(self, max_users: int = MAX_USERS) -> None:
        self.max_users = max_users
        self.users: list["User"] = []

    def join(self, user: "User") -> None:
        if len(self.users) >= self.max_users:
            raise RuntimeError(f"chat room is full ({self.max_users} users)")
        self.users.append(user)

    def send_message(self, message: str, sender: "User") -> list[str]:
        """Deliver a message and return what each recipient received, in join order."""
        return [
            user.receive(message, sender.name)
            for user in self.users
            if user is not sender
        ]


class User:
    """A chat participant; joining the room happens on creation."""

    def __init__(self, name: str, chat_room: ChatRoom) -> None:
        self.name = name
        self.chat_room = chat_room
        self.received: list[str] = []
        chat_room.join(self)

    def send(self, message: str) -> list[str]:
        return self.chat_room.send_message(message, self)

    def receive(self, message: str, sender_name: str) -> str:
        line = f"[{self.name}] {sender_name}: {message}"
        self.received.append(line)
        return line


def main(argv=None) -> int:
    room = ChatRoom()
    alice = User("Alice", room)
    bob = User("Bob", room)
    charlie = User("Charlie", room)

    for user, message in (
        (alice, "Hello! This is Alice!"),
        (bob, "Hey! Alice!"),
        (charlie, "Hello!"),
    ):
        for line in user.send(message):
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())