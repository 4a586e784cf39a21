"""Probability Calculator for Rock Paper Paradise.

Exact offer odds derived from the bonus weight table, plus an empirical
sampler for checking the reward generator.
"""

from collections import Counter
from math import comb

from src.core.bonus import BonusKind, RewardGenerator
from src.core.constants import BONUS_ODDS, BONUS_ROLL_RANGE, EVOLUTION_OFFERS
from src.core.element import Element
from src.core.loadout import Augmentation, Loadout

# Bonus keys from BONUS_ODDS grouped by the kind they produce
_KEY_KINDS = {
    "attack_plus": BonusKind.ATTACK_PLUS,
    "defense_plus": BonusKind.DEFENSE_PLUS,
    "augment_armored": BonusKind.AUGMENT,
    "augment_combo": BonusKind.AUGMENT,
    "augment_parry": BonusKind.AUGMENT,
    "enchant": BonusKind.ENCHANT,
    "double_down": BonusKind.DOUBLE_DOWN,
}


def _key_widths() -> dict[str, int]:
    widths = {}
    lower = 0
    for upper, key in BONUS_ODDS:
        widths[key] = upper - lower
        lower = upper
    return widths


class ProbabilityCalculator:
    """
    Calculate offer probabilities for the reward phase.
    """

    @staticmethod
    def bonus_kind_probability(kind: BonusKind) -> float:
        """
        Probability that a single bonus roll produces `kind`.

        Args:
            kind: The bonus kind.

        Returns:
            Probability (0.0 to 1.0).
        """
        width = sum(
            w for key, w in _key_widths().items() if _KEY_KINDS[key] is kind
        )
        return width / BONUS_ROLL_RANGE

    @staticmethod
    def augment_probability(augmentation: Augmentation) -> float:
        """
        Probability that a single bonus roll offers `augmentation`.

        Args:
            augmentation: The augmentation.

        Returns:
            Probability (0.0 to 1.0).
        """
        widths = _key_widths()
        return widths.get(f"augment_{augmentation.value}", 0) / BONUS_ROLL_RANGE

    @staticmethod
    def chance_to_see_kind(kind: BonusKind, offers: int = 3) -> float:
        """
        Probability of at least one `kind` among independent offers.

        Args:
            kind: The bonus kind.
            offers: Number of independent bonus rolls.

        Returns:
            Probability (0.0 to 1.0).
        """
        p_single = ProbabilityCalculator.bonus_kind_probability(kind)
        # P(at least one) = 1 - P(none in all offers)
        return 1 - (1 - p_single) ** offers

    @staticmethod
    def evolution_offer_probability(loadout: Loadout, element: Element) -> float:
        """
        Probability that `element` is among the evolution offers.

        Args:
            loadout: The player's loadout.
            element: The element to check.

        Returns:
            Probability (0.0 to 1.0). Owned elements are never offered.
        """
        if loadout.owns(element):
            return 0.0
        remaining = len(Element) - len(loadout.elements)
        picks = min(EVOLUTION_OFFERS, remaining)
        # Hypergeometric: subsets containing the element over all subsets
        return comb(remaining - 1, picks - 1) / comb(remaining, picks)

    @staticmethod
    def sample_bonus_distribution(
        generator: RewardGenerator,
        element: Element,
        samples: int,
    ) -> dict[BonusKind, float]:
        """
        Empirical frequency of each bonus kind over many rolls.

        Args:
            generator: Generator to roll with.
            element: Element the bonuses target.
            samples: Number of rolls.

        Returns:
            Frequency per kind, every kind present.
        """
        if samples <= 0:
            raise ValueError("samples must be positive")
        counts = Counter(generator.roll_bonus(element).kind for _ in range(samples))
        return {kind: counts.get(kind, 0) / samples for kind in BonusKind}
