from patternbook.observer import (
    EVENTS,
    Event,
    EventType,
    Publisher,
    Subscriber,
    main,
)


def test_update_follow_format():
    assert Subscriber(7).update(EVENTS[0]) == "Follow Event(7): Follow!"


def test_update_favorite_format():
    assert Subscriber(3).update(EVENTS[1]) == "Favorite Event(3): Favorite!"


def test_events_table():
    assert [event.type for event in EVENTS] == [EventType.FOLLOW, EventType.FAVORITE]
    publisher = Publisher()
    publisher.subscribe(Subscriber(0))
    lines = [line for event in EVENTS for line in publisher.notify(event)]
    assert lines == ["Follow Event(0): Follow!", "Favorite Event(0): Favorite!"]


def test_notify_reaches_subscribers_in_order():
    publisher = Publisher()
    subscribers = [Subscriber(i) for i in (5, 1, 9)]
    for subscriber in subscribers:
        publisher.subscribe(subscriber)
    event = Event(EventType.FOLLOW, "hi")
    assert publisher.notify(event) == [
        "Follow Event(5): hi",
        "Follow Event(1): hi",
        "Follow Event(9): hi",
    ]


def test_unsubscribe_removes_only_matching_id():
    publisher = Publisher()
    a, b, c = Subscriber(1), Subscriber(2), Subscriber(3)
    for subscriber in (a, b, c):
        publisher.subscribe(subscriber)
    assert publisher.unsubscribe(Subscriber(2)) is True
    assert publisher.subscribers == [a, c]


def test_unsubscribe_unknown_is_noop():
    publisher = Publisher()
    publisher.subscribe(Subscriber(1))
    assert publisher.unsubscribe(Subscriber(42)) is False
    assert publisher.subscribers == [Subscriber(1)]


def test_unsubscribe_removes_first_duplicate_only():
    publisher = Publisher()
    publisher.subscribe(Subscriber(4))
    publisher.subscribe(Subscriber(4))
    publisher.unsubscribe(Subscriber(4))
    assert publisher.subscribers == [Subscriber(4)]


def test_notify_with_no_subscribers():
    assert Publisher().notify(EVENTS[0]) == []


def test_many_subscribers_all_notified():
    publisher = Publisher()
    for i in range(20):
        publisher.subscribe(Subscriber(i))
    lines = publisher.notify(EVENTS[1])
    assert len(lines) == 20
    assert all(line.startswith("Favorite Event(") for line in lines)


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert sum(line.startswith("Follow Event(") for line in lines) == 3
    assert sum(line.startswith("Favorite Event(") for line in lines) == 2