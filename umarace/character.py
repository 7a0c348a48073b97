"""Runners, their race pacing, and the player's wallet."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass, field
from typing import Any

from .skill import Skill
from .track import TRACK_WIDTH

STARTING_CASH = 10000
WIN_PRIZE = 5000


class RaceStrategy(enum.IntEnum):
    """How a runner spreads its effort over the race."""

    ESCAPE = 0
    LEADER = 1
    CLOSER = 2

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    RaceStrategy.ESCAPE: "도주",
    RaceStrategy.LEADER: "선행",
    RaceStrategy.CLOSER: "추입",
}

# Multipliers for the early, middle and late segments of the race.
_PHASE_FACTORS = {
    RaceStrategy.ESCAPE: (1.0, 0.98, 0.96),
    RaceStrategy.LEADER: (0.97, 0.99, 0.97),
    RaceStrategy.CLOSER: (0.93, 1.0, 1.0),
}
_SPURT_FACTOR = 0.96 * 1.05


@dataclass(eq=False)
class Character:
    """A runner with stats, a strategy and the skills it has picked."""

    name: str
    speed: int
    power: int
    intel: int
    strategy: RaceStrategy
    dots: tuple[str, str] = ("p", "q")
    rank: int = 1
    position: int = 0
    skills: list[Skill] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.strategy = RaceStrategy(self.strategy)

    def lobby_info(self) -> str:
        """The stat sheet shown on the character selection screen."""
        return "\n".join(
            f"{label} : {value}     "
            for label, value in (
                ("이름", self.name),
                ("속도", self.speed),
                ("힘  ", self.power),
                ("지능", self.intel),
                ("전략", self.strategy.label),
            )
        )

    def add_skill(self, skill: Skill) -> None:
        self.skills.append(skill)

    def has_chosen(self, skill: Skill) -> bool:
        """Whether this very skill object has been picked already."""
        return any(chosen is skill for chosen in self.skills)

    def check_skills(self, position: int, rng: Any = None) -> list[Skill]:
        """Roll every skill at this position; apply and return those that fire."""
        fired = []
        for skill in self.skills:
            if skill.can_activate(position, self.rank, self.intel, rng):
                skill.apply(self)
                fired.append(skill)
        return fired

    def race_speed(self, rng: Any = None) -> int:
        """Distance covered this tick, depending on strategy and race segment."""
        roll = (rng or random).uniform(0.5, 1.5)
        base = 40.0 + (1.0 + self.power / 130.0) * roll
        early, middle, late = _PHASE_FACTORS[self.strategy]
        segment = TRACK_WIDTH // 6
        if self.position <= segment:
            pace = base * early
        elif self.position <= segment * 4:
            pace = base * middle
        elif self.position <= segment * 5:
            pace = base * late + int(self.speed / 20)
        else:
            pace = base * _SPURT_FACTOR + int(self.speed / 10)
        return math.floor(pace + 0.3)

    def dot(self, pose: int) -> str:
        """The character drawn on the track for the given animation pose."""
        return self.dots[0] if pose == 0 else self.dots[1]


@dataclass
class Wallet:
    """The player's money."""

    cash: int = STARTING_CASH

    def bet(self, amount: int) -> None:
        self.cash -= amount

    def award_win(self, bet: int, rank: int) -> int:
        """Pay the prize plus double the bet for a first place; return the amount paid."""
        if rank != 1:
            return 0
        winnings = WIN_PRIZE + bet * 2
        self.cash += winnings
        return winnings


_ROSTER = (
    ("하루 우라라", 100, 90, 90, RaceStrategy.ESCAPE, "U"),
    ("골드 쉽", 90, 90, 100, RaceStrategy.CLOSER, "G"),
    ("오구리 캡", 90, 100, 90, RaceStrategy.LEADER, "C"),
    ("스페셜 위크", 80, 90, 90, RaceStrategy.LEADER, "W"),
    ("사일런스 스즈카", 90, 70, 90, RaceStrategy.ESCAPE, "S"),
    ("토카이 테이오", 90, 80, 90, RaceStrategy.LEADER, "T"),
    ("마루젠스키", 90, 80, 90, RaceStrategy.ESCAPE, "M"),
    ("후지 키세키", 90, 90, 90, RaceStrategy.LEADER, "K"),
    ("타마모 크로스", 80, 90, 80, RaceStrategy.CLOSER, "X"),
    ("마야노 탑건", 70, 70, 90, RaceStrategy.CLOSER, "N"),
)


def create_roster() -> list[Character]:
    """A fresh list of every runner in the game."""
    return [
        Character(name, speed, power, intel, strategy, (dot, dot))
        for name, speed, power, intel, strategy, dot in _ROSTER
    ]