"""Tests for the offer probability calculator."""

import pytest

from src.core.bonus import BonusKind, RewardGenerator
from src.core.element import Element
from src.core.loadout import Augmentation, Loadout
from src.core.probability import ProbabilityCalculator


class TestBonusOdds:
    """Test exact bonus odds."""

    def test_kind_probabilities(self):
        """Test per-kind odds from the weight table."""
        calc = ProbabilityCalculator
        assert calc.bonus_kind_probability(BonusKind.ATTACK_PLUS) == pytest.approx(0.45)
        assert calc.bonus_kind_probability(BonusKind.DEFENSE_PLUS) == pytest.approx(0.15)
        assert calc.bonus_kind_probability(BonusKind.AUGMENT) == pytest.approx(0.15)
        assert calc.bonus_kind_probability(BonusKind.ENCHANT) == pytest.approx(0.15)
        assert calc.bonus_kind_probability(BonusKind.DOUBLE_DOWN) == pytest.approx(0.10)

    def test_kinds_sum_to_one(self):
        """Test the odds cover every roll."""
        total = sum(ProbabilityCalculator.bonus_kind_probability(k) for k in BonusKind)
        assert total == pytest.approx(1.0)

    def test_augment_probability(self):
        """Test each augmentation has a 5% band."""
        for augmentation in Augmentation:
            assert ProbabilityCalculator.augment_probability(augmentation) == pytest.approx(0.05)

    def test_chance_to_see_kind(self):
        """Test at least one Double Down among three offers."""
        chance = ProbabilityCalculator.chance_to_see_kind(BonusKind.DOUBLE_DOWN, offers=3)
        assert chance == pytest.approx(1 - 0.9 ** 3)


class TestEvolutionOdds:
    """Test evolution offer odds."""

    def test_starting_loadout(self):
        """Test two picks out of four remaining elements."""
        loadout = Loadout.rock_paper_scissors()
        odds = ProbabilityCalculator.evolution_offer_probability(loadout, Element.FIRE)
        assert odds == pytest.approx(0.5)

    def test_owned_never_offered(self):
        """Test owned elements have zero odds."""
        loadout = Loadout.rock_paper_scissors()
        assert ProbabilityCalculator.evolution_offer_probability(loadout, Element.ROCK) == 0.0

    def test_last_element_certain(self):
        """Test the only remaining element is always offered."""
        loadout = Loadout([e for e in Element if e is not Element.AIR])
        odds = ProbabilityCalculator.evolution_offer_probability(loadout, Element.AIR)
        assert odds == pytest.approx(1.0)


class TestSampling:
    """Test empirical sampling against the generator."""

    def test_distribution_close_to_exact(self):
        """Test sampled odds land near the exact odds."""
        generator = RewardGenerator(seed=1234)
        sampled = ProbabilityCalculator.sample_bonus_distribution(generator, Element.ROCK, 4000)
        assert set(sampled) == set(BonusKind)
        for kind, frequency in sampled.items():
            exact = ProbabilityCalculator.bonus_kind_probability(kind)
            assert frequency == pytest.approx(exact, abs=0.05)

    def test_samples_must_be_positive(self):
        """Test zero samples is rejected."""
        with pytest.raises(ValueError):
            ProbabilityCalculator.sample_bonus_distribution(RewardGenerator(seed=1), Element.ROCK, 0)
