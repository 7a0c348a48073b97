"""Rock-paper-scissors against the computer over ten rounds."""

from __future__ import annotations

import enum
import random
from typing import Any, Sequence

MATCHES = 10


class Hand(enum.IntEnum):
    """A hand, numbered as on the menu."""

    SCISSORS = 1
    ROCK = 2
    PAPER = 3

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def beats(self) -> Hand:
        return _BEATS[self]


_LABELS = {Hand.SCISSORS: "가위", Hand.ROCK: "바위", Hand.PAPER: "보"}
_BEATS = {Hand.SCISSORS: Hand.PAPER, Hand.ROCK: Hand.SCISSORS, Hand.PAPER: Hand.ROCK}


class Outcome(enum.Enum):
    """The result from the player's side; the value is the message shown."""

    WIN = "당신이 이겼습니다."
    LOSE = "당신이 졌습니다."
    DRAW = "비겼습니다."


def judge(player: int, computer: int) -> Outcome:
    """Decide a round; raises ValueError for a number that is not a hand."""
    player_hand, computer_hand = Hand(player), Hand(computer)
    if player_hand is computer_hand:
        return Outcome.DRAW
    return Outcome.WIN if player_hand.beats is computer_hand else Outcome.LOSE


def _play(rng: Any) -> None:
    wins = 0
    print("가위 바위 보를 시작합니다!")
    for _ in range(MATCHES):
        print("\n무엇을 내시겠습니까?")
        print("1. 가위\n2. 바위\n3. 보")
        text = input()
        computer = Hand(rng.randint(1, 3))
        try:
            player = Hand(int(text.strip()))
        except ValueError:
            continue
        outcome = judge(player, computer)
        print("컴퓨터 : 플레이어")
        print(f"{computer.label} vs {player.label} : {outcome.value}")
        if outcome is Outcome.WIN:
            wins += 1
    print("\n~~~~~~~~~~~~~~~빠밤~~~~~~~~~~~~~")
    print(f"승리한 횟수 : {wins}")


def main(argv: Sequence[str] | None = None) -> int:
    """Play ten rounds on standard input and output."""
    try:
        _play(random.Random())
    except EOFError:
        return 1
    return 0