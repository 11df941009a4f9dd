"""Observer pattern: a publisher notifying its subscribers of events."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto


class EventType(Enum):
    FOLLOW = auto()
    FAVORITE = auto()


@dataclass(frozen=True)
class Event:
    type: EventType
    description: str


EVENTS = (
    Event(EventType.FOLLOW, "Follow!"),
    Event(EventType.FAVORITE, "Favorite!"),
)

_LABELS = {
    EventType.FOLLOW: "Follow",
    EventType.FAVORITE: "Favorite",
}


@dataclass(frozen=True)
class Subscriber:
    """A subscriber identified by its id."""

    id: int

    def update(self, event: Event) -> str:
        """Describe how this subscriber saw the event."""
        return f"{_LABELS[event.type]} Event({self.id}): {event.description}"


class Publisher:
    """Keeps subscribers in order and passes every event to each of them."""

    def __init__(self) -> None:
        self.subscribers: list[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> None:
        self.subscribers.append(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> bool:
        """Remove the first subscriber with the same id; return whether one was found."""
        for position, current in enumerate(self.subscribers):
            if current.id == subscriber.id:
                del self.subscribers[position]
                return True
        return False

    def notify(self, event: Event) -> list[str]:
        return [subscriber.update(event) for subscriber in self.subscribers]


def main(argv=None) -> int:
    publisher = Publisher()
    sub1, sub2, sub3 = (Subscriber(random.randrange(2**31)) for _ in range(3))

    for subscriber in (sub1, sub2, sub3):
        publisher.subscribe(subscriber)
    for line in publisher.notify(EVENTS[0]):
        print(line)

    publisher.unsubscribe(sub2)
    for line in publisher.notify(EVENTS[1]):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())