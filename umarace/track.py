"""The race track: a long text strip with borders and a weather fill."""

from __future__ import annotations

import enum
from typing import Protocol, Sequence

TRACK_WIDTH = 24000
TRACK_HEIGHT = 15
PLAYER_FOCUS_WIDTH = 140
PLAYER_FOCUS_HEIGHT = 30
PLAYER_INDEX = 2
BORDER_MARK_EVERY = 100


class TrackCondition(enum.Enum):
    """Weather on the track; the value is the character the lanes are filled with."""

    CLEAR = " "
    RAINY = "."
    WINDY = "~"
    SNOWY = "*"

    @property
    def fill(self) -> str:
        return self.value


class _Runner(Protocol):
    def dot(self, pose: int) -> str: ...


class Track:
    """A grid of TRACK_HEIGHT rows, each TRACK_WIDTH characters long."""

    def __init__(self, condition: TrackCondition = TrackCondition.CLEAR) -> None:
        self.condition = condition
        self.rows: list[str] = []
        self.build()

    def build(self) -> None:
        """(Re)draw the border rows and fill the lanes for the current condition."""
        border = "".join(
            "/" if column % BORDER_MARK_EVERY == 0 else "="
            for column in range(TRACK_WIDTH)
        )
        lane = self.condition.fill * TRACK_WIDTH
        self.rows = [border, *([lane] * (TRACK_HEIGHT - 2)), border]

    def viewport(
        self,
        positions: Sequence[int],
        lanes: Sequence[int],
        characters: Sequence[_Runner],
        pose: int,
    ) -> list[str]:
        """Return the visible window centred on the player, with runners drawn in."""
        focus_x = positions[PLAYER_INDEX]
        focus_y = lanes[PLAYER_INDEX]
        start_x = max(focus_x - PLAYER_FOCUS_WIDTH // 2, 0)
        end_x = min(focus_x + PLAYER_FOCUS_WIDTH // 2, TRACK_WIDTH)
        start_y = max(focus_y - PLAYER_FOCUS_HEIGHT // 2, 0)
        end_y = min(focus_y + PLAYER_FOCUS_HEIGHT // 2, TRACK_HEIGHT)

        markers: dict[tuple[int, int], str] = {}
        for x, y, runner in zip(positions, lanes, characters):
            markers.setdefault((y, x), runner.dot(pose))

        return [
            "".join(
                markers.get((y, x), self.rows[y][x]) for x in range(start_x, end_x)
            )
            for y in range(start_y, end_y)
        ]