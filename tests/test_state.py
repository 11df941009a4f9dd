from patternbook.state import Human, StateKind, main


def test_starts_fine():
    assert Human("Takeshi").state is StateKind.FINE


def test_fine_action_moves_to_poison():
    human = Human("Ken")
    message = human.action()
    assert message.startswith("Ken") and message.endswith(" is fine!")
    assert human.state is StateKind.POISON


def test_poison_action_moves_to_dead():
    human = Human("Ken", StateKind.POISON)
    message = human.action()
    assert message.startswith("Ken") and message.endswith(" is poison...")
    assert human.state is StateKind.DEAD


def test_dead_action_moves_to_fine():
    human = Human("Ken", StateKind.DEAD)
    assert human.action() == "..."
    assert human.state is StateKind.FINE


def test_three_actions_complete_a_cycle():
    human = Human("Ken")
    messages = [human.action() for _ in range(3)]
    assert human.state is StateKind.FINE
    assert human.action() == messages[0]


def test_change_state_returns_self():
    human = Human("Ken")
    assert human.change_state(StateKind.DEAD) is human
    assert human.state is StateKind.DEAD


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "Takeshi is fine!",
        "Takeshi is poison...",
        "...",
    ]