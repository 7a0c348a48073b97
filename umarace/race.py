"""A single race: runners advance tick by tick until someone crosses the line."""

from __future__ import annotations

import random
import sys
import time
from typing import Any, Sequence, TextIO

from .character import Character, Wallet
from .console import FrameBuffer, clear_screen, goto
from .track import PLAYER_INDEX, TRACK_HEIGHT, TRACK_WIDTH, Track

FINISH_LINE = TRACK_WIDTH - 1
TICK_SECONDS = 0.03
RANKED_RUNNERS = 2

WIN_BANNER = r"""
 _    _  _____  _   _  _   _  _____ ______  _ 
| |  | ||_   _|| \ | || \ | ||  ___|| ___ \| |
| |  | |  | |  |  \| ||  \| || |__  | |_/ /| |
| |/\| |  | |  | . ` || . ` ||  __| |    / | |
\  /\  / _| |_ | |\  || |\  || |___ | |\ \ |_|
 \/  \/  \___/ \_| \_/\_| \_/\____/ \_| \_|(_)
"""

LOSE_BANNER = r"""
 _      _____  _____  _____  _ 
| |    |  _  |/  ___||  ___|| |
| |    | | | |\ `--. | |__  | |
| |    | | | | `--. \|  __| | |
| |____\ \_/ //\__/ /| |___ |_|
\_____/ \___/ \____/ \____/ (_)
"""


class Race:
    """Runners on a track; the one at PLAYER_INDEX is the player's pick."""

    def __init__(
        self,
        characters: Sequence[Character],
        track: Track,
        wallet: Wallet,
        out: TextIO | None = None,
        rng: Any = None,
        frame: FrameBuffer | None = None,
    ) -> None:
        if len(characters) <= PLAYER_INDEX:
            raise ValueError(f"a race needs at least {PLAYER_INDEX + 1} runners")
        self.characters = list(characters)
        self.track = track
        self.wallet = wallet
        self.out = out if out is not None else sys.stdout
        self.rng = rng if rng is not None else random
        self.frame = frame if frame is not None else FrameBuffer(self.out)
        count = len(self.characters)
        self.positions = [0] * count
        self.lanes = [(TRACK_HEIGHT // count) * lane + 2 for lane in range(count)]
        self.pose = 0

    @property
    def finished(self) -> bool:
        return any(x >= FINISH_LINE for x in self.positions)

    @property
    def player_won(self) -> bool:
        return self.positions[PLAYER_INDEX] >= FINISH_LINE

    def step(self) -> bool:
        """Advance one tick; return whether the race is over."""
        self.pose = (self.pose + 1) % 2
        for runner, x in zip(self.characters, self.positions):
            if runner.check_skills(x, self.rng):
                goto(0, TRACK_HEIGHT + 1, self.out)
                self.out.write("스킬 발동!\n")
        self.frame.flip(
            self.track.viewport(self.positions, self.lanes, self.characters, self.pose)
        )
        self.positions = [
            x + runner.race_speed(self.rng)
            for runner, x in zip(self.characters, self.positions)
        ]
        for runner, x in zip(self.characters, self.positions):
            runner.position = x
        self.update_ranks()
        return self.finished

    def update_ranks(self) -> None:
        """Rank the lead runners by distance covered; ties share a rank."""
        ranked = self.characters[:RANKED_RUNNERS]
        ranks = [
            1 + sum(other.position > runner.position for other in ranked)
            for runner in ranked
        ]
        for runner, rank in zip(ranked, ranks):
            runner.rank = rank

    def run(self, bet: int) -> bool:
        """Run the race to the end, settle the bet and return whether the player won."""
        with self.frame:
            while not self.step():
                time.sleep(TICK_SECONDS)
        won = self.player_won
        time.sleep(1)
        clear_screen(self.out)
        self.out.write((WIN_BANNER if won else LOSE_BANNER) + "\n")
        time.sleep(1)
        if won:
            self._pay_out(bet)
        return won

    def _pay_out(self, bet: int) -> None:
        clear_screen(self.out)
        winnings = self.wallet.award_win(bet, 1)
        self.out.write(
            f"+ {winnings - bet * 2} 원(1등 상금)\n"
            f"+ {bet * 2} 원(배팅금액 2배)\n"
            f"획득 금액 : {winnings} 원\n"
            f"현재 금액 : {self.wallet.cash} 원\n"
        )
        time.sleep(1)