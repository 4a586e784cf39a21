"""Player Loadout.

Owned elements plus the augmentations and aspects attached to them.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from src.core.element import Element

logger = logging.getLogger(__name__)


class Augmentation(Enum):
    """Conditional modifiers; each element holds at most one."""

    ARMORED = "armored"  # Incoming damage is capped at 1
    PARRY = "parry"      # Mirror throws heal 1 and stagger the opponent
    COMBO = "combo"      # Chained wins deal double damage

    def __str__(self) -> str:
        return self.value.capitalize()

    def get_description(self, element: Element) -> str:
        if self is Augmentation.ARMORED:
            return f"When {element} takes damage, it takes only 1 damage."
        if self is Augmentation.PARRY:
            return (
                f"When {element} meets {element}, heal 1. "
                f"The opponent must repeat {element} next turn."
            )
        return (
            f"{element} gains Combo. Whenever a Combo move wins a round, the "
            f"player gains Combo. The next time the player uses a Combo move, "
            f"if it wins, the damage is doubled. If it loses, the player loses Combo."
        )


@dataclass(frozen=True, order=True)
class Aspect:
    """
    A secondary element attached to an owned element.

    Whenever the owning element is thrown, both it and the aspect are
    compared against the enemy and the results are summed.
    """

    element: Element

    def __str__(self) -> str:
        return f"Aspect of {self.element}"

    def get_description(self, element: Element) -> str:
        return (
            f"{element} gains the Aspect of {self.element}. All results are "
            f"computed as the sum of the results of those two elements."
        )


@dataclass(frozen=True)
class Action:
    """A thrown element with its modifiers snapshotted at throw time."""

    guess: Element
    enchantment: Optional[Aspect] = None
    augmentation: Optional[Augmentation] = None

    def with_augmentation(self, augmentation: Augmentation) -> "Action":
        return Action(self.guess, self.enchantment, augmentation)

    def with_enchantment(self, aspect: Aspect) -> "Action":
        return Action(self.guess, aspect, self.augmentation)

    @property
    def aspects(self) -> list[Element]:
        """Elements this action fights as."""
        if self.enchantment is not None:
            return [self.guess, self.enchantment.element]
        return [self.guess]


class ElementNotOwnedError(ValueError):
    """Raised when a modifier targets an element outside the loadout."""


class Loadout:
    """Elements a player owns and their modifiers."""

    def __init__(self, elements: Iterable[Element]):
        """
        Initialize a loadout.

        Args:
            elements: Owned elements; must not be empty.
        """
        self.elements: set[Element] = set(elements)
        if not self.elements:
            raise ValueError("a loadout needs at least one element")
        self.augmentations: dict[Element, Augmentation] = {}
        self.enchantments: dict[Element, Aspect] = {}

    @classmethod
    def from_set(cls, elements: Iterable[Element]) -> "Loadout":
        return cls(elements)

    @classmethod
    def rock_paper_scissors(cls) -> "Loadout":
        """Starting loadout of the human player."""
        return cls([Element.ROCK, Element.PAPER, Element.SCISSORS])

    def owns(self, element: Element) -> bool:
        return element in self.elements

    def insert(self, element: Element) -> None:
        self.elements.add(element)

    def augment(self, element: Element, augmentation: Augmentation) -> None:
        """
        Attach an augmentation, replacing any previous one.

        Raises:
            ElementNotOwnedError: If the element is not owned.
        """
        if element not in self.elements:
            raise ElementNotOwnedError(f"cannot augment unowned element {element}")
        self.augmentations[element] = augmentation

    def enchant(self, element: Element, aspect: Aspect) -> None:
        """
        Attach an aspect, replacing any previous one.

        Raises:
            ElementNotOwnedError: If the element is not owned.
        """
        if element not in self.elements:
            raise ElementNotOwnedError(f"cannot enchant unowned element {element}")
        self.enchantments[element] = aspect

    def get_augmentation(self, element: Element) -> Optional[Augmentation]:
        if element not in self.elements:
            logger.warning(
                "Augmentation requested for an element the player doesn't have: %s %s",
                element,
                self.sorted_elements(),
            )
        return self.augmentations.get(element)

    def get_enchantment(self, element: Element) -> Optional[Aspect]:
        if element not in self.elements:
            logger.warning(
                "Enchantment requested for an element the player doesn't have: %s %s",
                element,
                self.sorted_elements(),
            )
        return self.enchantments.get(element)

    def action_for(self, element: Element) -> Action:
        """Snapshot the element's current modifiers into an Action."""
        return Action(
            guess=element,
            enchantment=self.get_enchantment(element),
            augmentation=self.get_augmentation(element),
        )

    def sorted_elements(self) -> list[Element]:
        return sorted(self.elements)

    def __repr__(self) -> str:
        names = ", ".join(str(e) for e in self.sorted_elements())
        return f"Loadout([{names}])"
