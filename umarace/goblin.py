"""A turn-based fight between the player and a goblin."""

from __future__ import annotations

import enum
from typing import Sequence

STARTING_HP = 5
_RULE = "#" * 47
_RIGHT = " " * 20


class Fighter(enum.IntEnum):
    """Who is acting; each side hits for a fixed amount."""

    PLAYER = 1
    GOBLIN = 2

    @property
    def damage(self) -> int:
        return 2 if self is Fighter.PLAYER else 1


def attack(attacker: int, hp: int) -> int:
    """The target's HP after being hit by the attacker."""
    hitter = Fighter.PLAYER if attacker == Fighter.PLAYER else Fighter.GOBLIN
    return hp - hitter.damage


def _status(fighter: Fighter, hp: int) -> None:
    if fighter is Fighter.PLAYER:
        print(f"\n{_RIGHT}플레이어\n{_RIGHT}H P : {hp}")
    else:
        print(f"\n고블린\nH P : {hp}")


def _fight() -> None:
    player_hp = STARTING_HP
    goblin_hp = STARTING_HP
    print("야생의 고블린이 나타났다!!")
    print(f"\n고블린\nH P : {goblin_hp}\nATK : {Fighter.GOBLIN.damage}")
    print(f"\n{_RIGHT}플레이어\n{_RIGHT}H P : {player_hp}\n{_RIGHT}ATK : {Fighter.PLAYER.damage}")

    while goblin_hp > 0 and player_hp > 0:
        print("\n행동을 정하십시오.")
        print("1. 공격\n2. 방어\n3. 도망")
        try:
            action = int(input().strip())
        except ValueError:
            continue
        if action == 1:
            print(_RULE)
            goblin_hp = attack(Fighter.PLAYER, goblin_hp)
            print(f"\n공격에 성공했습니다!  - {Fighter.PLAYER.damage}")
            _status(Fighter.GOBLIN, goblin_hp)
            player_hp = attack(Fighter.GOBLIN, player_hp)
            print(f"\n고블린이 공격했습니다!  - {Fighter.GOBLIN.damage}")
            _status(Fighter.PLAYER, player_hp)
            print(f"\n{_RULE}")
        elif action == 2:
            print(_RULE)
            print("\n단단해지기!!")
            print("\n고블린이 공격했습니다!\n전혀 아프지 않습니다.")
            _status(Fighter.PLAYER, player_hp)
            print(f"\n{_RULE}")
        elif action == 3:
            print(_RULE)
            print("\n도망에 성공했습니다!")
            player_hp = 0
            print(f"\n{_RULE}")

    print("\n" + "*" * 32)
    print("~~~전투는 무사히 끝났습니다!~~~")
    print("*" * 32)


def main(argv: Sequence[str] | None = None) -> int:
    """Fight the goblin on standard input and output."""
    try:
        _fight()
    except EOFError:
        return 1
    return 0