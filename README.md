# umarace

A small racing game for the terminal. Pick a runner, draw skills, place a
bet and watch six runners race down a 24,000-column track through a scrolling
window that follows your runner. The package also carries four little console
games: number baseball, rock–paper–scissors, a goblin fight and a calculator.
All on-screen text is in Korean.

## Installing

```
pip install .
```

## The race

```
umarace
```

Controls: the arrow keys move the cursor, Space confirms, Esc declines.
The screen is drawn with ANSI escape sequences.

1. **Menu** – start a game, the settings entry, or quit.
2. **Character** – choose one of three runners. Each has speed, power,
   intelligence and a running strategy (`RaceStrategy.ESCAPE`, `LEADER` or
   `CLOSER`) that sets how fast it goes in each segment of the track, with a
   final spurt over the last sixth.
3. **Skills** – three random skills are offered; take one with Space, or
   decline with Esc. After a pick, if you hold at least 2,000 won you are asked
   whether to pay 2,000 for another draw (Space pays, any other key stops).
   During the race a skill fires at most once, after the runner has passed the
   skill's position and meets its rank condition, with a chance set by the
   runner's intelligence; it then raises one stat.
4. **Bet** – you start with 10,000 won and raise or lower the bet in steps of
   500. The bet is taken from your money straight away.
5. **Race** – the race ends as soon as any runner crosses the line. If your
   runner has crossed it, you win 5,000 won plus twice your bet; otherwise the
   bet is lost. Then you are back at the menu.

From Python, the pieces can be used on their own:

```python
import random
from umarace.character import create_roster, Wallet

roster = create_roster()
runner = roster[0]
print(runner.lobby_info())
print(runner.race_speed(random.Random(1)))

wallet = Wallet()
wallet.bet(500)
print(wallet.award_win(500, 1))   # 6000
```

`umarace.track.Track` builds the track and `Track.viewport(...)` returns the
visible window as lines of text; `umarace.race.Race` runs a race tick by tick
with `step()` or to the end with `run(bet)`.

## The small games

```
umarace-baseball                 # guess three distinct digits; strikes and balls, with betting
umarace-rps                      # ten rounds of rock-paper-scissors against the computer
umarace-goblin                   # attack, defend or flee from a goblin
umarace-calculator               # add, subtract, multiply or divide two integers
umarace-calculator --whimsical   # add or subtract depending on which number is larger
```

In number baseball any strike or ball pays twice the bet; a round with none
costs the bet a second time. The game lasts at most ten rounds.

Their rules are available as plain functions too:
`umarace.baseball.score(secret, guess)`, `umarace.baseball.draw_secret(rng)`,
`umarace.rps.judge(player, computer)`, `umarace.goblin.attack(attacker, hp)`,
`umarace.calculator.calculate(a, b, operation)` and
`umarace.calculator.whimsical(a, b)`.

## What it does not do

- The menu's settings entry does nothing; choosing it returns to the menu.
- Track weather (`TrackCondition`) can be set only from Python; the game
  always races on a clear track.
- Ranks during a race are worked out only for the first two runners, so the
  rank condition on a skill is judged against the player's starting rank.
- Money is not saved between runs of the game.

## Running the tests

```
pip install .[test]
pytest
```