from patternbook.prototype import User, main


def test_clone_equals_original():
    original = User("Alice", 23)
    copy = original.clone()
    assert copy == original
    assert copy is not original


def test_clone_is_independent():
    original = User("Alice", 23)
    copy = original.clone()
    copy.name = "Bob"
    copy.age = 40
    assert original.name == "Alice"
    assert original.age == 23


def test_clone_of_clone():
    original = User("Carol", 31)
    assert original.clone().clone() == original


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "user1: (Alice, 23)",
        "user2: (Alice, 23)",
    ]