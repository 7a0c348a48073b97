"""Number baseball: guess three distinct digits and bet on hitting any of them."""

from __future__ import annotations

import random
from typing import Any, NamedTuple, Sequence

DIGITS = 3
STARTING_MONEY = 10000
MIN_BET = 100
BET_UNIT = 100
ROUNDS = 10

_RULE = "@" * 46


class Score(NamedTuple):
    """Strikes (right digit, right place) and balls (right digit, wrong place)."""

    strikes: int
    balls: int

    @property
    def hits(self) -> int:
        return self.strikes + self.balls


def draw_secret(rng: Any = None) -> tuple[int, ...]:
    """Three distinct digits from 0 to 9."""
    return tuple((rng or random).sample(range(10), DIGITS))


def score(secret: Sequence[int], guess: Sequence[int]) -> Score:
    """Compare a guess with the secret."""
    if len(secret) != len(guess):
        raise ValueError("secret and guess must have the same number of digits")
    strikes = sum(s == g for s, g in zip(secret, guess))
    matches = sum(s == g for s in secret for g in guess)
    return Score(strikes, matches - strikes)


def valid_bet(amount: int) -> bool:
    """A bet is at least the minimum and a whole multiple of the bet unit."""
    return amount >= MIN_BET and amount % BET_UNIT == 0


def _ask_int(prompt: str = "") -> int:
    while True:
        text = input(prompt)
        try:
            return int(text.strip())
        except ValueError:
            print("잘못된 입력입니다. 다시 입력하십시오")


def _ask_continue() -> bool:
    while True:
        answer = _ask_int("1. 예\n2. 아니오 : ")
        if answer in (1, 2):
            return answer == 1
        print("\n잘못된 입력입니다. 다시 입력하십시오")


def _ask_digit(prompt: str, taken: Sequence[int]) -> int:
    digit = _ask_int(prompt)
    while True:
        if not 0 <= digit < 10:
            print("숫자가 잘못되었습니다.\n다시 입력해주세요!")
        elif digit in taken:
            print("숫자가 중복 되었습니다.\n다시 입력해주세요!")
        else:
            return digit
        digit = _ask_int()


def _ask_bet(money: int) -> int:
    bet = _ask_int()
    while True:
        if bet > money:
            print("배팅액이 소지금보다 많습니다. 다시 배팅해주세요!")
        elif not valid_bet(bet):
            print("배팅액이 잘못 되었습니다. 다시 배팅해주세요!")
        else:
            return bet
        bet = _ask_int()


def _play_round(round_no: int, money: int) -> int:
    print(f"\n{_RULE}\n{round_no}라운드\n\n숫자를 순서대로 맞춰보세요")
    guess: list[int] = []
    for label in ("첫번째", "두번째", "세번째"):
        guess.append(_ask_digit(f"{label} 숫자 : ", guess))
    print("\n당신이 정한 숫자는")
    print(f"{', '.join(map(str, guess))}입니다.")

    print(f"\n배팅을 해주세요.\n최소 배팅액은 {MIN_BET}원 입니다.")
    bet = _ask_bet(money)
    money -= bet
    print(f"\n배팅되었습니다.\n현재 소지금은 {money} 원 입니다")

    input("\n'x'를 눌러 결과를 확인하세요!")
    result = score(draw_secret(), guess)
    print(_RULE)
    print(f"{result.strikes} 스트라이크 {result.balls} 볼 ")
    print(_RULE)

    if result.hits < 1:
        print("저런 삼진아웃입니다. 배팅액만큼 추가로 돈을 잃었습니다.\n")
        money -= bet
    else:
        print("축하합니다! 배팅액의 두배를 드리겠습니다.\n")
        money += bet * 2
    print(f"{' ' * 30}소지금 : {money}")
    return money


def _play() -> None:
    print("숫자 야구 한 판 하시겠습니다?")
    if not _ask_continue():
        print("\n아쉽네요ㅠㅠ 다음에 뵙겠습니다^^")
        return

    money = STARTING_MONEY
    print(f"\n{STARTING_MONEY}원을 드리겠습니다")
    print(f"{' ' * 30}소지금 : {money}")
    print("\n저는 0 ~ 9 사이에서 서로 다른 3가지 숫자를 정했습니다.")

    for round_no in range(1, ROUNDS + 1):
        money = _play_round(round_no, money)
        print("\n다음 라운드를 진행하시겠습니까 ? ")
        keep_going = _ask_continue()
        if money < MIN_BET:
            print("\n아이코! 돈이 없으시군요. 집으로 돌아가세요!")
            break
        if not keep_going:
            break

    print("\n" + "*" * 47)
    print("GAME OVER")
    print("*" * 47)


def main(argv: Sequence[str] | None = None) -> int:
    """Play number baseball on standard input and output."""
    try:
        _play()
    except EOFError:
        return 1
    return 0