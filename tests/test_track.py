import pytest

from umarace.track import (
    PLAYER_FOCUS_WIDTH,
    PLAYER_INDEX,
    TRACK_HEIGHT,
    TRACK_WIDTH,
    Track,
    TrackCondition,
)


class Runner:
    def __init__(self, first, second):
        self.dots = (first, second)

    def dot(self, pose):
        return self.dots[0] if pose == 0 else self.dots[1]


def lanes_for(count):
    return [(TRACK_HEIGHT // count) * i + 2 for i in range(count)]


def test_dimensions():
    track = Track()
    assert len(track.rows) == TRACK_HEIGHT
    assert all(len(row) == TRACK_WIDTH for row in track.rows)


def test_border_rows_have_marks_every_hundred():
    track = Track()
    for row in (track.rows[0], track.rows[-1]):
        assert row[0] == "/"
        assert row[100] == "/"
        assert row[1] == "="
        assert row[99] == "="
        assert set(row) == {"/", "="}


@pytest.mark.parametrize(
    "condition, fill",
    [
        (TrackCondition.CLEAR, " "),
        (TrackCondition.RAINY, "."),
        (TrackCondition.WINDY, "~"),
        (TrackCondition.SNOWY, "*"),
    ],
)
def test_lane_fill_follows_condition(condition, fill):
    track = Track(condition)
    for row in track.rows[1:-1]:
        assert set(row) == {fill}


def test_rebuild_after_condition_change():
    track = Track()
    track.condition = TrackCondition.SNOWY
    track.build()
    assert set(track.rows[5]) == {"*"}


def test_viewport_at_start_is_clipped_left():
    track = Track()
    runners = [Runner(c, c.lower()) for c in "ABCDEF"]
    positions = [0] * 6
    view = track.viewport(positions, lanes_for(6), runners, 0)
    assert len(view) == TRACK_HEIGHT
    assert all(len(line) == PLAYER_FOCUS_WIDTH // 2 for line in view)


def test_viewport_in_middle_has_full_width_and_draws_runners():
    track = Track()
    runners = [Runner(c, c.lower()) for c in "ABCDEF"]
    positions = [1000, 1010, 1020, 1030, 1040, 1050]
    lanes = lanes_for(6)
    view = track.viewport(positions, lanes, runners, 0)
    start = positions[PLAYER_INDEX] - PLAYER_FOCUS_WIDTH // 2
    assert all(len(line) == PLAYER_FOCUS_WIDTH for line in view)
    for x, y, runner in zip(positions, lanes, runners):
        assert view[y][x - start] == runner.dot(0)


def test_viewport_uses_pose():
    track = Track()
    runners = [Runner(c, c.lower()) for c in "ABCDEF"]
    positions = [500] * 6
    lanes = lanes_for(6)
    view = track.viewport(positions, lanes, runners, 1)
    start = positions[PLAYER_INDEX] - PLAYER_FOCUS_WIDTH // 2
    assert view[lanes[PLAYER_INDEX]][500 - start] == "c"


def test_viewport_first_runner_wins_shared_cell():
    track = Track()
    runners = [Runner("A", "A"), Runner("B", "B"), Runner("C", "C")]
    view = track.viewport([300, 300, 300], [4, 4, 4], runners, 0)
    start = 300 - PLAYER_FOCUS_WIDTH // 2
    assert view[4][300 - start] == "A"


def test_viewport_near_finish_is_clipped_right():
    track = Track()
    runners = [Runner("X", "X")] * 3
    focus = TRACK_WIDTH - 10
    view = track.viewport([0, 0, focus], [2, 7, 12], runners, 0)
    start = focus - PLAYER_FOCUS_WIDTH // 2
    assert all(len(line) == TRACK_WIDTH - start for line in view)
    assert view[0] == track.rows[0][start:]