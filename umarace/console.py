"""Terminal helpers: key input, cursor movement and a two-page frame buffer."""

from __future__ import annotations

import enum
import os
import select
import sys
from typing import Iterable, TextIO

ESC = "\x1b"
HOME = f"{ESC}[H"
CLEAR = f"{ESC}[2J"
CLEAR_LINE = f"{ESC}[K"
HIDE_CURSOR = f"{ESC}[?25l"
SHOW_CURSOR = f"{ESC}[?25h"


class Key(enum.IntEnum):
    """Keys the game reacts to, valued by their console scan codes."""

    UP = 72
    DOWN = 80
    LEFT = 75
    RIGHT = 77
    SPACE = 0
    ESC = 27


_CODES = {
    72: Key.UP,
    80: Key.DOWN,
    77: Key.RIGHT,
    75: Key.LEFT,
    ord(" "): Key.SPACE,
    27: Key.ESC,
}

_ANSI_ARROWS = {"A": Key.UP, "B": Key.DOWN, "C": Key.RIGHT, "D": Key.LEFT}


def decode_key(char: str | int) -> Key | None:
    """Map a character (or its code) to a game key; None if it means nothing."""
    code = ord(char) if isinstance(char, str) else char
    return _CODES.get(code)


def _read_windows() -> Key | None:
    import msvcrt

    char = msvcrt.getwch()
    if char in ("\x00", "\xe0"):
        char = msvcrt.getwch()
    return decode_key(char)


def _read_posix(fd: int) -> Key | None:
    import termios
    import tty

    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        first = os.read(fd, 1)
        if not first:
            raise EOFError("no more input")
        if first == ESC.encode():
            if not select.select([fd], [], [], 0.05)[0]:
                return Key.ESC
            sequence = os.read(fd, 2).decode("latin-1")
            if len(sequence) == 2 and sequence[0] in "[O":
                return _ANSI_ARROWS.get(sequence[1])
            return None
        return decode_key(first.decode("latin-1"))
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _read_once() -> Key | None:
    stdin = sys.stdin
    if not stdin.isatty():
        char = stdin.read(1)
        if not char:
            raise EOFError("no more input")
        return decode_key(char)
    if os.name == "nt":
        return _read_windows()
    return _read_posix(stdin.fileno())


def read_key() -> Key:
    """Block until a key the game understands is pressed."""
    while True:
        key = _read_once()
        if key is not None:
            return key


def goto(x: int, y: int, out: TextIO | None = None) -> None:
    """Move the cursor to column x, row y (both from zero)."""
    (out or sys.stdout).write(f"{ESC}[{y + 1};{x + 1}H")


def clear_screen(out: TextIO | None = None) -> None:
    """Blank the screen and put the cursor in the top-left corner."""
    (out or sys.stdout).write(CLEAR + HOME)


class FrameBuffer:
    """Two pages of screen text; each flip fills the back page and shows it."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.pages: list[list[str]] = [[], []]
        self.current = 0

    @property
    def shown(self) -> list[str]:
        """The page most recently put on screen."""
        return self.pages[1 - self.current]

    def flip(self, lines: Iterable[str]) -> None:
        page = list(lines)
        self.pages[self.current] = page
        self.out.write(HOME + "".join(f"{line}{CLEAR_LINE}\n" for line in page))
        self.out.flush()
        self.current ^= 1

    def __enter__(self) -> FrameBuffer:
        self.out.write(HIDE_CURSOR)
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.out.write(SHOW_CURSOR)
        self.out.flush()