"""Menus around the race: title, character, skills, betting and the main loop."""

from __future__ import annotations

import random
import sys
import time
from typing import Any, Iterable, Iterator, Sequence, TextIO

from .character import Character, Wallet, create_roster
from .console import Key, clear_screen, goto, read_key
from .race import Race
from .skill import public_skills
from .track import Track

MENU_X = 30
MENU_TOP = 12
MENU_BOTTOM = 14
SELECTABLE_CHARACTERS = 3
CHARACTER_SPACING = 19
BET_STEP = 500
SKILL_PRICE = 2000
SKILL_OFFER = 3

TITLE = r"""
 __    __  .___  ___.      ___      .______   ____    ____  ______    __  
|  |  |  | |   \/   |     /   \     |   _  \  \   \  /   / /  __  \  |  | 
|  |  |  | |  \  /  |    /  ^  \    |  |_)  |  \   \/   / |  |  |  | |  | 
|  |  |  | |  |\/|  |   /  /_\  \   |   ___/    \_    _/  |  |  |  | |  | 
|  `--'  | |  |  |  |  /  _____  \  |  |          |  |    |  `--'  | |  | 
 \______/  |__|  |__| /__/     \__\ | _|          |__|     \______/  |__| 
"""


def _live_keys() -> Iterator[Key]:
    while True:
        yield read_key()


def _key_stream(keys: Iterable[Key] | None) -> Iterator[Key]:
    return _live_keys() if keys is None else iter(keys)


def _next_key(stream: Iterator[Key]) -> Key:
    try:
        return next(stream)
    except StopIteration:
        raise EOFError("input ended") from None


def _output(out: TextIO | None) -> TextIO:
    return out if out is not None else sys.stdout


def title_banner() -> str:
    """The game's title art."""
    return TITLE


def menu(keys: Iterable[Key] | None = None, out: TextIO | None = None) -> int:
    """Main menu: 0 starts a game, 1 is settings, 2 quits."""
    out = _output(out)
    y = MENU_TOP
    goto(MENU_X - 2, y, out)
    out.write("> 게 임 시 작")
    goto(MENU_X, y + 1, out)
    out.write("게 임 설 정(미구현)")
    goto(MENU_X, y + 2, out)
    out.write("   종 료   ")
    out.flush()
    for key in _key_stream(keys):
        if key is Key.UP and y > MENU_TOP:
            goto(MENU_X - 2, y, out)
            out.write(" ")
            y -= 1
            goto(MENU_X - 2, y, out)
            out.write(">")
        elif key is Key.DOWN and y < MENU_BOTTOM:
            goto(MENU_X - 2, y, out)
            out.write(" ")
            y += 1
            goto(MENU_X - 2, y, out)
            out.write(">")
        elif key is Key.SPACE:
            return y - MENU_TOP
        out.flush()
    raise EOFError("input ended before a menu choice was made")


def _show_info(character: Character, out: TextIO) -> None:
    goto(0, 8, out)
    out.write(character.lobby_info() + "\n")


def choose_character(
    roster: Sequence[Character],
    keys: Iterable[Key] | None = None,
    out: TextIO | None = None,
) -> int:
    """Pick one of the first three runners with LEFT/RIGHT; return its index."""
    out = _output(out)
    x, y = 3, 6
    clear_screen(out)
    out.write("\n\n                     [캐 릭 터    선 택]\n\n")
    goto(x, y, out)
    out.write("> [HARU URARA]")
    goto(x + CHARACTER_SPACING, y, out)
    out.write("  [GOLD SHIP ]")
    goto(x + 2 * CHARACTER_SPACING + 1, y, out)
    out.write(" [OGURI CAP ]")
    index = 0
    _show_info(roster[index], out)
    out.flush()
    for key in _key_stream(keys):
        if key is Key.RIGHT and index < SELECTABLE_CHARACTERS - 1:
            goto(x, y, out)
            out.write(" ")
            x += CHARACTER_SPACING
            goto(x, y, out)
            out.write(">")
            index += 1
            _show_info(roster[index], out)
        elif key is Key.LEFT and index > 0:
            goto(x, y, out)
            out.write(" ")
            x -= CHARACTER_SPACING
            goto(x, y, out)
            out.write(">")
            index -= 1
            _show_info(roster[index], out)
        elif key is Key.SPACE:
            return index
        out.flush()
    raise EOFError("input ended before a character was chosen")


def choose_bet(
    wallet: Wallet,
    keys: Iterable[Key] | None = None,
    out: TextIO | None = None,
) -> int:
    """Raise or lower the bet in steps of 500; the bet is taken from the wallet."""
    out = _output(out)
    x, y = 3, 6
    clear_screen(out)
    held = wallet.cash
    bet = 0
    out.write("\n배팅 금액을 설정하세요 (500원 단위)\n\n")
    out.write(f"                   소지금 : {held}\n")

    def show() -> None:
        goto(x, y, out)
        out.write("      원\n")
        goto(x, y, out)
        out.write(f"{bet}\n")
        out.flush()

    show()
    for key in _key_stream(keys):
        if key is Key.UP and bet < held:
            bet += BET_STEP
            show()
        elif key is Key.DOWN and bet >= 100:
            bet -= BET_STEP
            show()
        elif key is Key.SPACE:
            wallet.bet(bet)
            return bet
    raise EOFError("input ended before a bet was placed")


def choose_skill(
    character: Character,
    wallet: Wallet,
    keys: Iterable[Key] | None = None,
    out: TextIO | None = None,
    rng: Any = None,
) -> bool:
    """Offer three random skills; return True if the player paid for another pick."""
    out = _output(out)
    rng = rng if rng is not None else random
    stream = _key_stream(keys)
    x, y = 3, 6
    clear_screen(out)
    out.write("\n\n                     [스 킬    선 택]\n")
    out.write(f"소지금 : {wallet.cash}\n")

    candidates = [skill for skill in public_skills() if not character.has_chosen(skill)]
    rng.shuffle(candidates)
    offered = candidates[:SKILL_OFFER]
    for row, skill in enumerate(offered):
        goto(x, y + row, out)
        out.write(("> " if row == 0 else "  ") + skill.name)
    out.flush()

    index = 0
    for key in stream:
        if key is Key.UP and index > 0:
            goto(x, y + index, out)
            out.write("  ")
            index -= 1
            goto(x, y + index, out)
            out.write("> ")
        elif key is Key.DOWN and index < len(offered) - 1:
            goto(x, y + index, out)
            out.write("  ")
            index += 1
            goto(x, y + index, out)
            out.write("> ")
        elif key is Key.SPACE:
            chosen = offered[index]
            character.add_skill(chosen)
            out.write(f"\n\n\n{chosen.name} 스킬을 선택했습니다.\n")
            out.flush()
            time.sleep(0.5)
            if wallet.cash < SKILL_PRICE:
                out.write("\n\n\n소지금이 부족하여 스킬 선택을 종료하겠습니다.\n")
                out.flush()
                time.sleep(0.5)
                return False
            out.write(f"\n\n\n추가 스킬 선택을 위해 {SKILL_PRICE}원을 사용하시겠습니까?\n")
            out.flush()
            if _next_key(stream) is Key.SPACE:
                wallet.bet(SKILL_PRICE)
                return True
            return False
        elif key is Key.ESC:
            return False
        out.flush()
    raise EOFError("input ended before a skill was chosen")


def choose_skills(
    character: Character,
    wallet: Wallet,
    keys: Iterable[Key] | None = None,
    out: TextIO | None = None,
    rng: Any = None,
) -> None:
    """Keep offering skills while the player pays for more."""
    stream = _key_stream(keys)
    while choose_skill(character, wallet, stream, out, rng):
        pass


def _play(wallet: Wallet, stream: Iterator[Key], out: TextIO, rng: Any) -> None:
    roster = create_roster()
    index = choose_character(roster, stream, out)
    choose_skills(roster[index], wallet, stream, out, rng)
    bet = choose_bet(wallet, stream, out)
    runners = [
        roster[3],
        roster[4],
        roster[index],
        roster[(index + 1) % SELECTABLE_CHARACTERS],
        roster[5],
        roster[6],
    ]
    Race(runners, Track(), wallet, out, rng).run(bet)
    out.write("\n경기가 종료되었습니다. 메인 메뉴로 돌아갑니다.\n")
    out.flush()
    time.sleep(2)


def main_menu(
    wallet: Wallet,
    keys: Iterable[Key] | None = None,
    out: TextIO | None = None,
    rng: Any = None,
) -> None:
    """Show the title and menu until the player quits."""
    out = _output(out)
    stream = _key_stream(keys)
    while True:
        clear_screen(out)
        out.write(title_banner() + "\n")
        choice = menu(stream, out)
        if choice == 0:
            _play(wallet, stream, out, rng)
        elif choice == 2:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the terminal."""
    out = sys.stdout
    out.write("\x1b]0;umapyoi\x07")
    try:
        main_menu(Wallet(), None, out, None)
    except KeyboardInterrupt:
        return 0
    except EOFError:
        return 1
    finally:
        out.flush()
    return 0