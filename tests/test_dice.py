"""
Tests for the dice engine.
"""

from collections import Counter

import pytest

from starforge.dice import DiceRoller
from starforge.errors import InvalidParameterError
from tests.helpers import FixedRng, faces_2d6, scripted_dice


class TestDiceRoller:
    """Test the DiceRoller class."""

    def test_roll_2d6_range(self, seeded_dice):
        """2d6 totals stay in 2-12."""
        for _ in range(200):
            result = seeded_dice.roll_2d6("range check")
            assert 2 <= result.total <= 12
            assert len(result.rolls) == 2

    def test_same_seed_same_sequence(self):
        first = DiceRoller(seed=1234)
        second = DiceRoller(seed=1234)
        assert [first.roll("3d6").total for _ in range(50)] == [second.roll("3d6").total for _ in range(50)]

    def test_set_seed_restarts_sequence(self):
        dice = DiceRoller(seed=5)
        before = [dice.roll_2d6().total for _ in range(10)]
        dice.set_seed(5)
        assert [dice.roll_2d6().total for _ in range(10)] == before
        assert dice.seed == 5

    def test_notation_with_modifier(self):
        dice = scripted_dice(4)
        result = dice.roll("1d10-1", "grade")
        assert result.total == 3
        assert result.modifier == -1
        assert str(result) == "1d10-1: [4] - 1 = 3"

    def test_notation_without_count(self):
        result = scripted_dice(6).roll("d6+2")
        assert result.total == 8
        assert str(result) == "d6+2: [6] + 2 = 8"

    @pytest.mark.parametrize("notation", ["", "2x6", "d", "0d6", "2d0", "2d6+"])
    def test_invalid_notation_raises(self, notation):
        with pytest.raises(InvalidParameterError) as exc_info:
            DiceRoller(seed=1).roll(notation)
        assert exc_info.value.field == "notation"

    def test_str_format(self):
        result = scripted_dice(3, 5).roll_2d6()
        assert str(result) == "2d6: [3, 5] = 8"

    def test_roll_log(self, clean_dice):
        clean_dice.roll_2d6("first")
        clean_dice.roll_d66("second")
        log = clean_dice.get_roll_log()
        assert [r.reason for r in log] == ["first", "second"]
        clean_dice.clear_roll_log()
        assert clean_dice.get_roll_log() == []


class TestAdvantage:
    """Advantage and disadvantage keep the best or worst faces."""

    def test_advantage_keeps_highest(self):
        result = scripted_dice(1, 6, 4).roll_2d6("adv", advantage=1)
        assert sorted(result.rolls) == [4, 6]
        assert result.dropped == [1]
        assert result.total == 10

    def test_disadvantage_keeps_lowest(self):
        result = scripted_dice(1, 6, 4).roll_2d6("dis", disadvantage=1)
        assert sorted(result.rolls) == [1, 4]
        assert result.dropped == [6]
        assert result.total == 5

    def test_advantage_and_disadvantage_cancel(self):
        result = scripted_dice(2, 3).roll_2d6("both", advantage=1, disadvantage=1)
        assert result.rolls == [2, 3]
        assert result.dropped == []


class TestD66:
    """d66 tens/units rolls."""

    def test_code_from_two_dice(self):
        result = scripted_dice(3, 4).roll_d66("culture")
        assert result.code == "34"
        assert result.total == 34
        assert str(result) == "d66: [3, 4] = 34"

    def test_ordinary_roll_has_no_code(self):
        assert scripted_dice(*faces_2d6(7)).roll_2d6().code is None

    def test_all_36_codes_occur(self):
        dice = DiceRoller(seed=2024)
        counts = Counter(dice.roll_d66().code for _ in range(3600))
        expected = {f"{t}{u}" for t in range(1, 7) for u in range(1, 7)}
        assert set(counts) == expected
        # 100 expected per code
        assert all(40 <= n <= 180 for n in counts.values())


class TestHelpers:
    """randint, choice, uniform and log_uniform."""

    def test_choice_uses_index_draw(self):
        assert scripted_dice(2).choice(["a", "b", "c"]) == "c"

    def test_choice_empty_raises(self):
        with pytest.raises(InvalidParameterError):
            DiceRoller(seed=1).choice([])

    def test_uniform_bounds(self, seeded_dice):
        for _ in range(100):
            assert 1.5 <= seeded_dice.uniform(1.5, 2.5) <= 2.5

    def test_log_uniform_bounds(self, seeded_dice):
        for _ in range(100):
            value = seeded_dice.log_uniform(0.05, 500)
            assert 0.05 * (1 - 1e-9) <= value <= 500 * (1 + 1e-9)

    def test_log_uniform_midpoint_is_geometric_mean(self):
        value = scripted_dice().log_uniform(1, 100)
        assert value == pytest.approx(10)

    def test_log_uniform_rejects_non_positive(self):
        with pytest.raises(InvalidParameterError):
            DiceRoller(seed=1).log_uniform(0, 10)

    def test_fixed_rng_max(self):
        dice = DiceRoller(rng=FixedRng(high=True))
        assert dice.roll_2d6().total == 12
        assert dice.roll_d66().code == "66"
