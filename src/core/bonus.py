"""Bonus System for Rock Paper Paradise.

Generates the upgrade offers presented after a won battle and applies the
chosen bonus to the element table and the player's loadout.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from src.core.constants import (
    ATTACK_PLUS_DELTA,
    BONUS_OFFERS,
    BONUS_ROLL_RANGE,
    DEFENSE_PLUS_DELTA,
    EVOLUTION_OFFERS,
    get_bonus_key,
)
from src.core.element import Element, ElementTable, Payout
from src.core.loadout import Aspect, Augmentation, Loadout

logger = logging.getLogger(__name__)


class BonusKind(Enum):
    """The closed set of bonus variants."""

    ATTACK_PLUS = "attack_plus"    # +1 damage dealt against one enemy element
    DEFENSE_PLUS = "defense_plus"  # -1 damage taken against one enemy element
    DOUBLE_DOWN = "double_down"    # Doubles every payout of the element
    AUGMENT = "augment"            # Attaches an Augmentation
    ENCHANT = "enchant"            # Attaches an Aspect


@dataclass(frozen=True)
class Bonus:
    """
    A bonus choice.

    Only the payload field matching `kind` is set: `enemy_element` for
    ATTACK_PLUS/DEFENSE_PLUS, `augmentation` for AUGMENT, `aspect` for ENCHANT.
    """

    kind: BonusKind
    enemy_element: Optional[Element] = None
    augmentation: Optional[Augmentation] = None
    aspect: Optional[Aspect] = None

    def __post_init__(self):
        needs_enemy = self.kind in (BonusKind.ATTACK_PLUS, BonusKind.DEFENSE_PLUS)
        if needs_enemy != (self.enemy_element is not None):
            raise ValueError(f"{self.kind.value} bonus has a mismatched enemy element")
        if (self.kind is BonusKind.AUGMENT) != (self.augmentation is not None):
            raise ValueError(f"{self.kind.value} bonus has a mismatched augmentation")
        if (self.kind is BonusKind.ENCHANT) != (self.aspect is not None):
            raise ValueError(f"{self.kind.value} bonus has a mismatched aspect")

    @classmethod
    def attack_plus(cls, enemy_element: Element) -> "Bonus":
        return cls(BonusKind.ATTACK_PLUS, enemy_element=enemy_element)

    @classmethod
    def defense_plus(cls, enemy_element: Element) -> "Bonus":
        return cls(BonusKind.DEFENSE_PLUS, enemy_element=enemy_element)

    @classmethod
    def double_down(cls) -> "Bonus":
        return cls(BonusKind.DOUBLE_DOWN)

    @classmethod
    def augment(cls, augmentation: Augmentation) -> "Bonus":
        return cls(BonusKind.AUGMENT, augmentation=augmentation)

    @classmethod
    def enchant(cls, aspect: Aspect) -> "Bonus":
        return cls(BonusKind.ENCHANT, aspect=aspect)

    def get_readable_name(self) -> str:
        if self.kind is BonusKind.ATTACK_PLUS:
            return f"Attack+ vs. {self.enemy_element}"
        if self.kind is BonusKind.DEFENSE_PLUS:
            return f"Defense+ vs. {self.enemy_element}"
        if self.kind is BonusKind.DOUBLE_DOWN:
            return "Double Down"
        if self.kind is BonusKind.AUGMENT:
            return f"Augmentation: {self.augmentation}"
        return f"Enchantment: {self.aspect}"

    def get_description(self, element: Element) -> str:
        if self.kind is BonusKind.ATTACK_PLUS:
            return f"{element} deals 1 additional damage against {self.enemy_element}"
        if self.kind is BonusKind.DEFENSE_PLUS:
            return (
                f"{element} receives 1 less damage (or heals 1 more HP) "
                f"against {self.enemy_element}"
            )
        if self.kind is BonusKind.DOUBLE_DOWN:
            return f"Doubles all payouts for {element}."
        if self.kind is BonusKind.AUGMENT:
            return self.augmentation.get_description(element)
        return self.aspect.get_description(element)

    def update_game(
        self,
        table: ElementTable,
        loadout: Loadout,
        element_to_upgrade: Element,
    ) -> None:
        """
        Apply this bonus to `element_to_upgrade`.

        Does nothing when the element is not in the loadout.

        Args:
            table: The campaign's element table.
            loadout: The player's loadout.
            element_to_upgrade: Owned element receiving the bonus.
        """
        if not loadout.owns(element_to_upgrade):
            logger.debug(
                "Ignoring %s for unowned element %s",
                self.get_readable_name(),
                element_to_upgrade,
            )
            return

        if self.kind is BonusKind.ATTACK_PLUS:
            table.update(
                element_to_upgrade,
                self.enemy_element,
                Payout.from_tuple(ATTACK_PLUS_DELTA),
            )
        elif self.kind is BonusKind.DEFENSE_PLUS:
            table.update(
                element_to_upgrade,
                self.enemy_element,
                Payout.from_tuple(DEFENSE_PLUS_DELTA),
            )
        elif self.kind is BonusKind.DOUBLE_DOWN:
            for enemy_element in Element:
                table.double(element_to_upgrade, enemy_element)
        elif self.kind is BonusKind.AUGMENT:
            loadout.augment(element_to_upgrade, self.augmentation)
        elif self.kind is BonusKind.ENCHANT:
            loadout.enchant(element_to_upgrade, self.aspect)


@dataclass
class Upgrades:
    """Offers presented while the campaign is providing a bonus."""

    bonuses: list[tuple[Bonus, Element]] = field(default_factory=list)
    evolutions: list[Element] = field(default_factory=list)


class RewardGenerator:
    """Rolls bonus and evolution offers."""

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        """
        Initialize the generator.

        Args:
            rng: Shared random source. Created from `seed` when omitted.
            seed: Random seed for reproducible results.
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def roll_bonus(self, bonus_element: Element) -> Bonus:
        """
        Roll a single bonus for `bonus_element`.

        Enchantments never offer the element's own aspect.
        """
        key = get_bonus_key(self.rng.randrange(BONUS_ROLL_RANGE))
        if key == "attack_plus":
            return Bonus.attack_plus(Element.random(self.rng))
        if key == "defense_plus":
            return Bonus.defense_plus(Element.random(self.rng))
        if key == "augment_armored":
            return Bonus.augment(Augmentation.ARMORED)
        if key == "augment_combo":
            return Bonus.augment(Augmentation.COMBO)
        if key == "augment_parry":
            return Bonus.augment(Augmentation.PARRY)
        if key == "enchant":
            return Bonus.enchant(Aspect(Element.random_without(self.rng, bonus_element)))
        return Bonus.double_down()

    def generate_upgrades(self, loadout: Loadout) -> Upgrades:
        """
        Generate the offers for one reward phase.

        Draw order: the target elements first, then each bonus roll, then
        the evolutions.

        Args:
            loadout: The player's current loadout.

        Returns:
            Upgrades with BONUS_OFFERS bonuses and up to EVOLUTION_OFFERS evolutions.
        """
        owned = loadout.sorted_elements()
        bonus_elements = [
            Element.random_item(self.rng, owned) for _ in range(BONUS_OFFERS)
        ]
        bonuses = [(self.roll_bonus(element), element) for element in bonus_elements]

        remaining = [e for e in Element if not loadout.owns(e)]
        evolutions = sorted(Element.random_subset(self.rng, remaining, EVOLUTION_OFFERS))

        return Upgrades(bonuses=bonuses, evolutions=evolutions)
