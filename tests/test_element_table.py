"""Tests for elements and the element dominance table.

Tests:
- Cyclic win/loss/draw relation
- Default payouts and in-place mutation
- Bonus roll mapping
- Seeded random helpers
"""

import importlib.util
import random

import pytest

from src.core.constants import get_bonus_key
from src.core.element import Element, ElementTable, Payout


class TestElement:
    """Test the element cycle."""

    def test_rock_loses_to_next_three(self):
        """Test that Rock loses to Water, Air and Paper."""
        for other in (Element.WATER, Element.AIR, Element.PAPER):
            assert Element.ROCK.compare(other) == -1
            assert Element.ROCK.loses_to(other)

    def test_rock_beats_previous_three(self):
        """Test that Rock beats Earth, Scissors and Fire."""
        for other in (Element.EARTH, Element.SCISSORS, Element.FIRE):
            assert Element.ROCK.compare(other) == 1
            assert Element.ROCK.beats(other)

    def test_self_is_draw(self):
        """Test that every element draws against itself."""
        for element in Element:
            assert element.compare(element) == 0

    def test_relation_is_balanced(self):
        """Test each element beats three and loses to three."""
        for element in Element:
            results = [element.compare(other) for other in Element]
            assert results.count(1) == 3
            assert results.count(-1) == 3
            assert results.count(0) == 1

    def test_relation_is_antisymmetric(self):
        """Test a beats b exactly when b loses to a."""
        for a in Element:
            for b in Element:
                assert a.compare(b) == -b.compare(a)

    def test_from_key(self):
        """Test element lookup by key."""
        assert Element.from_key("rock") is Element.ROCK
        assert Element.from_key(" Fire ") is Element.FIRE
        assert Element.SCISSORS.key == "scissors"
        assert str(Element.SCISSORS) == "Scissors"

    def test_from_key_unknown(self):
        """Test that unknown keys raise ValueError."""
        with pytest.raises(ValueError):
            Element.from_key("lava")


class TestPayout:
    """Test payout arithmetic."""

    def test_add(self):
        """Test field-wise addition."""
        assert Payout(1, 0) + Payout(2, 3) == Payout(3, 3)

    def test_sum(self):
        """Test that payouts can be summed from zero."""
        assert sum([Payout(1, 0), Payout(0, 1), Payout(1, 1)]) == Payout(2, 2)

    def test_multiply(self):
        """Test scaling by an integer."""
        assert Payout(1, 2) * 2 == Payout(2, 4)
        assert 3 * Payout(0, 1) == Payout(0, 3)

    def test_invert(self):
        """Test swapping the point of view."""
        assert Payout(1, 0).invert() == Payout(0, 1)


class TestElementTable:
    """Test ElementTable functionality."""

    @pytest.fixture
    def table(self):
        return ElementTable()

    def test_dense(self, table):
        """Test that all 49 pairs exist."""
        assert len(table) == 49
        for mine in Element:
            for theirs in Element:
                table.evaluate(mine, theirs)

    def test_default_payouts(self, table):
        """Test win, loss and draw payouts."""
        assert table.evaluate(Element.ROCK, Element.WATER) == Payout(1, 0)
        assert table.evaluate(Element.ROCK, Element.EARTH) == Payout(0, 1)
        assert table.evaluate(Element.ROCK, Element.ROCK) == Payout(0, 0)

    def test_rejects_partial_table(self):
        """Test that a table missing pairs is rejected."""
        with pytest.raises(ValueError):
            ElementTable({(Element.ROCK, Element.ROCK): Payout()})

    def test_evaluate_miss_raises(self, table):
        """Test that a lookup outside the element pairs raises KeyError."""
        with pytest.raises(KeyError):
            table.evaluate("rock", Element.ROCK)

    def test_update(self, table):
        """Test adding a delta to one pair."""
        table.update(Element.ROCK, Element.FIRE, Payout(0, 1))
        assert table.evaluate(Element.ROCK, Element.FIRE) == Payout(0, 2)
        # Reverse pair untouched
        assert table.evaluate(Element.FIRE, Element.ROCK) == Payout(1, 0)

    def test_double_twice(self, table):
        """Test that doubling twice quadruples the payout."""
        table.double(Element.ROCK, Element.FIRE)
        table.double(Element.ROCK, Element.FIRE)
        assert table.evaluate(Element.ROCK, Element.FIRE) == Payout(0, 4)

    def test_double_loss(self, table):
        """Test that doubling also doubles damage taken."""
        table.double(Element.ROCK, Element.WATER)
        assert table.evaluate(Element.ROCK, Element.WATER) == Payout(2, 0)

    def test_copy_is_independent(self, table):
        """Test that a copy is not affected by later updates."""
        snapshot = table.copy()
        table.update(Element.ROCK, Element.FIRE, Payout(0, 1))
        assert snapshot != table
        assert snapshot == ElementTable()

    def test_describe_payouts(self, table):
        """Test readable payout lines in element order."""
        lines = table.describe_payouts(Element.ROCK, [Element.FIRE, Element.WATER])
        assert lines == [
            "vs. Water: you take 1, enemy takes 0",
            "vs. Fire: you take 0, enemy takes 1",
        ]


class TestBonusKeys:
    """Test bonus roll mapping."""

    def test_boundaries(self):
        """Test rolls on both sides of each boundary."""
        assert get_bonus_key(0) == "attack_plus"
        assert get_bonus_key(44) == "attack_plus"
        assert get_bonus_key(45) == "defense_plus"
        assert get_bonus_key(60) == "augment_armored"
        assert get_bonus_key(65) == "augment_combo"
        assert get_bonus_key(70) == "augment_parry"
        assert get_bonus_key(75) == "enchant"
        assert get_bonus_key(89) == "enchant"
        assert get_bonus_key(90) == "double_down"
        assert get_bonus_key(99) == "double_down"

    def test_out_of_range(self):
        """Test that rolls outside the range raise ValueError."""
        with pytest.raises(ValueError):
            get_bonus_key(100)
        with pytest.raises(ValueError):
            get_bonus_key(-1)


class TestRandomHelpers:
    """Test seeded element draws."""

    def test_random_set_size(self):
        """Test drawing distinct elements."""
        drawn = Element.random_set(random.Random(1), 3)
        assert len(drawn) == 3

    def test_random_subset_small_pool(self):
        """Test that a short pool is returned whole."""
        pool = [Element.AIR, Element.FIRE]
        assert Element.random_subset(random.Random(1), pool, 5) == set(pool)

    def test_random_item_empty(self):
        """Test that picking from nothing raises ValueError."""
        with pytest.raises(ValueError):
            Element.random_item(random.Random(1), [])

    def test_random_without(self):
        """Test that the excluded element is never drawn."""
        rng = random.Random(3)
        for _ in range(200):
            assert Element.random_without(rng, Element.AIR) is not Element.AIR

    def test_reproducible(self):
        """Test that equal seeds give equal draws regardless of input order."""
        items = {Element.FIRE, Element.ROCK, Element.PAPER, Element.AIR}
        first = Element.random_subset(random.Random(42), items, 2)
        second = Element.random_subset(random.Random(42), list(reversed(sorted(items))), 2)
        assert first == second


class TestModuleImport:
    """Test the module loads on its own."""

    def test_import(self):
        """Test executing the module source defines the seeded helpers."""
        source = importlib.util.find_spec("src.core.element").origin
        spec = importlib.util.spec_from_file_location("element_copy", source)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        assert callable(module.Element.random)
        assert callable(module.Element.random_without)
        assert len(module.ElementTable()) == 49
