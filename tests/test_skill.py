from umarace.skill import Skill, StatKind, public_skills, unique_skills


class FixedRoll:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


class Stats:
    def __init__(self):
        self.speed = 90
        self.power = 80
        self.intel = 70


def test_activates_when_roll_below_intel():
    skill = Skill("재빠름", 5, StatKind.SPEED, 0, 0, 0)
    assert skill.can_activate(10, 1, 90, FixedRoll(50)) is True
    assert skill.used is True


def test_activates_only_once():
    skill = Skill("재빠름", 5, StatKind.SPEED, 0, 0, 0)
    assert skill.can_activate(10, 1, 90, FixedRoll(0))
    assert skill.can_activate(10, 1, 90, FixedRoll(0)) is False


def test_roll_at_or_above_intel_fails():
    skill = Skill("재빠름", 5, StatKind.SPEED, 0, 0, 0)
    assert skill.can_activate(10, 1, 90, FixedRoll(90)) is False
    assert skill.used is False


def test_position_below_threshold_fails():
    skill = Skill("파죽지세!", 10, StatKind.POWER, 0, 20000, 1)
    assert skill.can_activate(19999, 1, 100, FixedRoll(0)) is False
    assert skill.can_activate(20000, 1, 100, FixedRoll(0)) is True


def test_rank_below_minimum_fails():
    skill = Skill("전심전력!", 10, StatKind.POWER, 1, 20000, 4)
    assert skill.can_activate(20000, 3, 100, FixedRoll(0)) is False
    assert skill.can_activate(20000, 4, 100, FixedRoll(0)) is True


def test_apply_raises_matching_stat():
    for stat in StatKind:
        target = Stats()
        before = {name: getattr(target, name) for name in ("speed", "power", "intel")}
        Skill("x", 7, stat, 0, 0, 0).apply(target)
        for name, value in before.items():
            expected = value + 7 if name == stat.attribute else value
            assert getattr(target, name) == expected


def test_stat_accepts_plain_integer():
    skill = Skill("x", 1, 2, 0, 0, 0)
    assert skill.stat is StatKind.INTEL


def test_public_skills_catalogue():
    skills = public_skills()
    assert [s.name for s in skills] == [
        "파죽지세!",
        "전심전력!",
        "승리를 향한 집념!",
        "재빠름",
        "강력함",
        "똑똑함",
    ]
    assert skills[2].position == 12000
    assert skills[2].min_rank == 6
    assert all(not s.used for s in skills)


def test_public_skills_are_fresh_objects():
    first = public_skills()
    second = public_skills()
    assert all(a is not b for a, b in zip(first, second))
    first[0].used = True
    assert second[0].used is False


def test_unique_skills_catalogue():
    skills = unique_skills()
    assert [s.name for s in skills] == ["두근두근 준비 땅!", "파란주의포!", "승리의 고동!"]
    assert skills[2].value == 15
    assert skills[2].stat is StatKind.SPEED