"""Skills that boost a runner's stats once during a race."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Any


class StatKind(enum.IntEnum):
    """The stat a skill raises."""

    SPEED = 0
    POWER = 1
    INTEL = 2

    @property
    def attribute(self) -> str:
        return self.name.lower()


@dataclass(eq=False)
class Skill:
    """A one-shot skill that triggers past a track position at a given rank or worse."""

    name: str
    value: int
    stat: StatKind
    kind: int
    position: int
    min_rank: int
    used: bool = False

    def __post_init__(self) -> None:
        self.stat = StatKind(self.stat)

    def can_activate(self, position: int, rank: int, intel: int, rng: Any = None) -> bool:
        """Roll for activation; a skill that fires is marked used and never fires again."""
        if self.used:
            return False
        if position >= self.position and rank >= self.min_rank:
            chance = (rng or random).randrange(100)
            if chance < intel:
                self.used = True
                return True
        return False

    def apply(self, character: Any) -> None:
        """Raise the character's stat by this skill's value."""
        attribute = self.stat.attribute
        setattr(character, attribute, getattr(character, attribute) + self.value)


_PUBLIC = (
    ("파죽지세!", 10, StatKind.POWER, 0, 20000, 1),
    ("전심전력!", 10, StatKind.POWER, 1, 20000, 4),
    ("승리를 향한 집념!", 10, StatKind.POWER, 2, 12000, 6),
    ("재빠름", 5, StatKind.SPEED, 0, 0, 0),
    ("강력함", 5, StatKind.SPEED, 1, 0, 0),
    ("똑똑함", 5, StatKind.SPEED, 2, 0, 0),
)

_UNIQUE = (
    ("두근두근 준비 땅!", 10, StatKind.POWER, 0, 20000, 0),
    ("파란주의포!", 5, StatKind.POWER, 0, 16000, 0),
    ("승리의 고동!", 15, StatKind.SPEED, 1, 22000, 0),
)


def public_skills() -> list[Skill]:
    """A fresh set of the skills any runner can pick."""
    return [Skill(*spec) for spec in _PUBLIC]


def unique_skills() -> list[Skill]:
    """A fresh set of the character-specific skills."""
    return [Skill(*spec) for spec in _UNIQUE]