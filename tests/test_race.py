import io
import random
from unittest import mock

import pytest

from umarace.character import WIN_PRIZE, Character, RaceStrategy, Wallet, create_roster
from umarace.console import FrameBuffer
from umarace.race import FINISH_LINE, LOSE_BANNER, WIN_BANNER, Race
from umarace.track import PLAYER_INDEX, TRACK_HEIGHT, Track


@pytest.fixture(scope="module")
def track():
    return Track()


def make_race(track, runners=None, seed=7):
    runners = runners if runners is not None else create_roster()[:6]
    out = io.StringIO()
    race = Race(runners, track, Wallet(), out, random.Random(seed), FrameBuffer(out))
    return race, out


def test_lanes_are_spread_over_track(track):
    race, _ = make_race(track)
    assert race.lanes == [2, 4, 6, 8, 10, 12]
    assert all(0 < lane < TRACK_HEIGHT - 1 for lane in race.lanes)


def test_too_few_runners_rejected(track):
    with pytest.raises(ValueError):
        Race(create_roster()[:2], track, Wallet(), io.StringIO())


def test_step_moves_every_runner_forward(track):
    race, _ = make_race(track)
    race.step()
    assert all(x > 0 for x in race.positions)
    assert [runner.position for runner in race.characters] == race.positions


def test_step_alternates_pose(track):
    race, _ = make_race(track)
    race.step()
    first = race.pose
    race.step()
    assert race.pose == 1 - first


def test_step_draws_viewport_with_player(track):
    race, _ = make_race(track)
    player = race.characters[PLAYER_INDEX]
    race.step()
    shown = race.frame.shown
    assert len(shown) == TRACK_HEIGHT
    assert player.dot(race.pose) in shown[race.lanes[PLAYER_INDEX]]


def test_update_ranks_orders_lead_runners(track):
    race, _ = make_race(track)
    first, second, third = race.characters[:3]
    first.position, second.position, third.position = 100, 200, 300
    race.update_ranks()
    assert (first.rank, second.rank) == (2, 1)
    assert third.rank == 1


def test_update_ranks_ties_share_rank(track):
    race, _ = make_race(track)
    first, second = race.characters[:2]
    first.position = second.position = 500
    race.update_ranks()
    assert first.rank == second.rank == 1


@mock.patch("time.sleep")
def test_run_player_wins_and_is_paid(_sleep, track):
    runners = create_roster()[:6]
    runners[PLAYER_INDEX] = Character("빠른 말", 90, 100000, 90, RaceStrategy.ESCAPE)
    race, out = make_race(track, runners)
    bet = 500
    before = race.wallet.cash
    assert race.run(bet) is True
    assert race.positions[PLAYER_INDEX] >= FINISH_LINE
    assert race.wallet.cash == before + WIN_PRIZE + bet * 2
    assert WIN_BANNER in out.getvalue()
    assert f"현재 금액 : {race.wallet.cash} 원" in out.getvalue()


@mock.patch("time.sleep")
def test_run_player_loses_and_keeps_cash(_sleep, track):
    runners = create_roster()[:6]
    runners[0] = Character("빠른 말", 90, 100000, 90, RaceStrategy.ESCAPE)
    race, out = make_race(track, runners)
    before = race.wallet.cash
    assert race.run(1000) is False
    assert race.finished
    assert race.positions[PLAYER_INDEX] < FINISH_LINE
    assert race.wallet.cash == before
    assert LOSE_BANNER in out.getvalue()