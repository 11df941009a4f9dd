import pytest

from patternbook.strategy import JobType, Player, main


@pytest.mark.parametrize(
    "job, effect",
    [
        (JobType.WIZARD, "魔法攻撃!"),
        (JobType.FIGHTER, "パンチ攻撃!"),
        (JobType.HEALER, "回復!"),
    ],
)
def test_action_uses_job_strategy(job, effect):
    player = Player(job, "Hero")
    action = player.action()
    assert action.startswith("Hero")
    assert action.endswith(effect)


def test_job_accepts_enum_value():
    assert Player("healer", "Aid").job is JobType.HEALER


def test_unknown_job_raises():
    with pytest.raises(ValueError):
        Player("ninja", "Shadow")


def test_same_job_same_effect_different_names():
    first = Player(JobType.FIGHTER, "A").action()
    second = Player(JobType.FIGHTER, "B").action()
    assert first[1:] == second[1:]
    assert first != second


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("魔法使い") and lines[0].endswith("魔法攻撃!")
    assert lines[1].startswith("ファイター") and lines[1].endswith("パンチ攻撃!")
    assert lines[2].startswith("ヒーラー") and lines[2].endswith("回復!")