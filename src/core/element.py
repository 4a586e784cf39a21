"""Elements and the Element Dominance Table.

The seven elements sit on a fixed cycle. Each element loses to the three
elements that follow it on the cycle, beats the three that precede it, and
draws against itself.
"""

from random import Random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Sequence

from src.core.constants import (
    DOUBLE_DOWN_FACTOR,
    DRAW_PAYOUT,
    LOSING_SPAN,
    LOSS_PAYOUT,
    WIN_PAYOUT,
)


class Element(IntEnum):
    """The seven elements, in cyclic order."""

    ROCK = 0
    WATER = 1
    AIR = 2
    PAPER = 3
    EARTH = 4
    SCISSORS = 5
    FIRE = 6

    def __str__(self) -> str:
        return self.name.capitalize()

    @property
    def key(self) -> str:
        """Lower-case name used by the CLI and API."""
        return self.name.lower()

    @classmethod
    def from_key(cls, key: str) -> "Element":
        """
        Look up an element by its key.

        Raises:
            ValueError: If no element has that key.
        """
        try:
            return cls[key.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown element: {key}") from None

    def compare(self, other: "Element") -> int:
        """
        Compare against another element on the cycle.

        Returns:
            1 if this element wins, -1 if it loses, 0 on a draw.
        """
        distance = (other - self) % len(Element)
        if distance == 0:
            return 0
        if distance <= LOSING_SPAN:
            return -1
        return 1

    def beats(self, other: "Element") -> bool:
        return self.compare(other) > 0

    def loses_to(self, other: "Element") -> bool:
        return self.compare(other) < 0

    # -- Random helpers ------------------------------------------------------
    # Every draw takes the rng explicitly and works on sorted input so that a
    # seeded rng always reproduces the same sequence.

    @classmethod
    def random(cls, rng: Random) -> "Element":
        return rng.choice(list(cls))

    @classmethod
    def random_without(cls, rng: Random, exception: "Element") -> "Element":
        return rng.choice([e for e in cls if e != exception])

    @classmethod
    def random_set(cls, rng: Random, amount: int) -> set["Element"]:
        return cls.random_subset(rng, list(cls), amount)

    @staticmethod
    def random_item(rng: Random, items: Iterable["Element"]) -> "Element":
        pool = sorted(items)
        if not pool:
            raise ValueError("cannot pick from an empty element set")
        return rng.choice(pool)

    @staticmethod
    def random_subset(
        rng: Random,
        items: Iterable["Element"],
        amount: int,
    ) -> set["Element"]:
        """Sample up to `amount` distinct elements; all of them if fewer."""
        pool = sorted(set(items))
        return set(rng.sample(pool, min(amount, len(pool))))


@dataclass(frozen=True)
class Payout:
    """Damage pair produced by comparing two elements."""

    damage_to_me: int = 0
    damage_to_enemy: int = 0

    @classmethod
    def from_tuple(cls, values: tuple[int, int]) -> "Payout":
        return cls(damage_to_me=values[0], damage_to_enemy=values[1])

    def __add__(self, other: "Payout") -> "Payout":
        if not isinstance(other, Payout):
            return NotImplemented
        return Payout(
            self.damage_to_me + other.damage_to_me,
            self.damage_to_enemy + other.damage_to_enemy,
        )

    def __radd__(self, other):
        # sum() starts from 0
        if other == 0:
            return self
        return NotImplemented

    def __mul__(self, factor: int) -> "Payout":
        if not isinstance(factor, int):
            return NotImplemented
        return Payout(self.damage_to_me * factor, self.damage_to_enemy * factor)

    __rmul__ = __mul__

    def invert(self) -> "Payout":
        """Swap the point of view."""
        return Payout(self.damage_to_enemy, self.damage_to_me)


class ElementTable:
    """
    Payout for every ordered (mine, theirs) pair of elements.

    The table is dense: all 49 pairs are created up front and only ever
    mutated in place, so evaluate() never misses for a valid pair.
    """

    def __init__(self, payouts: Optional[dict[tuple[Element, Element], Payout]] = None):
        if payouts is None:
            payouts = self._default_payouts()
        self._payouts: dict[tuple[Element, Element], Payout] = dict(payouts)
        if len(self._payouts) != len(Element) ** 2:
            raise ValueError("element table must cover every element pair")

    @staticmethod
    def _default_payouts() -> dict[tuple[Element, Element], Payout]:
        win = Payout.from_tuple(WIN_PAYOUT)
        loss = Payout.from_tuple(LOSS_PAYOUT)
        draw = Payout.from_tuple(DRAW_PAYOUT)

        payouts = {}
        for mine in Element:
            for theirs in Element:
                result = mine.compare(theirs)
                if result > 0:
                    payouts[(mine, theirs)] = win
                elif result < 0:
                    payouts[(mine, theirs)] = loss
                else:
                    payouts[(mine, theirs)] = draw
        return payouts

    def update(self, mine: Element, theirs: Element, delta: Payout) -> None:
        """Add `delta` to the stored payout for (mine, theirs)."""
        key = (mine, theirs)
        if key in self._payouts:
            self._payouts[key] = self._payouts[key] + delta

    def double(self, mine: Element, theirs: Element) -> None:
        """Double both fields of the stored payout for (mine, theirs)."""
        key = (mine, theirs)
        if key in self._payouts:
            self._payouts[key] = self._payouts[key] * DOUBLE_DOWN_FACTOR

    def evaluate(self, mine: Element, theirs: Element) -> Payout:
        return self._payouts[(mine, theirs)]

    def copy(self) -> "ElementTable":
        return ElementTable(self._payouts)

    def __len__(self) -> int:
        return len(self._payouts)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ElementTable):
            return NotImplemented
        return self._payouts == other._payouts

    def describe_payouts(
        self,
        element: Element,
        enemy_elements: Sequence[Element],
    ) -> list[str]:
        """
        Readable payout lines for one element against a set of enemy elements.

        Args:
            element: The element being inspected.
            enemy_elements: Elements the opponent can throw.

        Returns:
            One line per enemy element, in element order.
        """
        lines = []
        for enemy in sorted(enemy_elements):
            payout = self.evaluate(element, enemy)
            lines.append(
                f"vs. {enemy}: you take {payout.damage_to_me}, "
                f"enemy takes {payout.damage_to_enemy}"
            )
        return lines
