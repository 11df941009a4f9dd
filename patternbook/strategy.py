"""Strategy pattern: players whose action depends on their job."""

from __future__ import annotations

from enum import Enum


class JobType(Enum):
    WIZARD = "wizard"
    FIGHTER = "fighter"
    HEALER = "healer"


_STRATEGIES = {
    JobType.WIZARD: "魔法攻撃!",
    JobType.FIGHTER: "パンチ攻撃!",
    JobType.HEALER: "回復!",
}


class Player:
    """A named player acting by the strategy of their job."""

    def __init__(self, job, name: str) -> None:
        self.job = JobType(job)
        self.name = name

    def action(self) -> str:
        return f"{self.name}の行動: {_STRATEGIES[self.job]}"


def main(argv=None) -> int:
    players = [
        Player(JobType.WIZARD, "魔法使い"),
        Player(JobType.FIGHTER, "ファイター"),
        Player(JobType.HEALER, "ヒーラー"),
    ]
    for player in players:
        print(player.action())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())