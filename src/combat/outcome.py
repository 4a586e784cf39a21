"""Round Outcome Resolution.

Combines two thrown actions, the element table and each side's carried-over
Combo and Stagger markers into the damage each side takes and the markers
that apply to the following round.

Resolution order:
- Aspect expansion and raw payout (sum over every aspect pairing)
- Armored clamp of incoming damage
- Parry adjustment on mirrored throws
- Stagger assignment on mirrored throws
- Combo eligibility
- Combo doubling
"""

from dataclasses import dataclass
from itertools import product

from src.core.element import ElementTable, Payout
from src.core.loadout import Action, Augmentation


@dataclass(frozen=True)
class PlayerOutcome:
    """What one side takes away from a round."""

    damage: int
    next_combo: bool = False
    next_stagger: bool = False


@dataclass(frozen=True)
class Outcome:
    """Resolved result of one round."""

    p1_action: Action
    p1_outcome: PlayerOutcome
    p2_action: Action
    p2_outcome: PlayerOutcome

    @property
    def is_mirror(self) -> bool:
        return self.p1_action.guess == self.p2_action.guess


def raw_payout(table: ElementTable, p1_action: Action, p2_action: Action) -> Payout:
    """Sum of table payouts over every pairing of both sides' aspects."""
    return sum(
        (
            table.evaluate(mine, theirs)
            for mine, theirs in product(p1_action.aspects, p2_action.aspects)
        ),
        Payout(),
    )


def _armored(damage: int, action: Action) -> int:
    if action.augmentation is Augmentation.ARMORED and damage > 0:
        return 1
    return damage


def resolve_outcome(
    table: ElementTable,
    p1_action: Action,
    p1_combo: bool,
    p1_stagger: bool,
    p2_action: Action,
    p2_combo: bool,
    p2_stagger: bool,
) -> Outcome:
    """
    Resolve one round between two actions.

    Args:
        table: The campaign's element table.
        p1_action: Player one's action.
        p1_combo: Whether player one holds a Combo marker entering the round.
        p1_stagger: Whether player one holds a Stagger marker entering the round.
        p2_action: Player two's action.
        p2_combo: Whether player two holds a Combo marker entering the round.
        p2_stagger: Whether player two holds a Stagger marker entering the round.

    Returns:
        The resolved Outcome.
    """
    payout = raw_payout(table, p1_action, p2_action)

    # damage_to_me is player one's incoming damage, damage_to_enemy player two's
    p1_taken = _armored(payout.damage_to_me, p1_action)
    p2_taken = _armored(payout.damage_to_enemy, p2_action)

    is_parry_throw = p1_action.guess == p2_action.guess
    p1_has_parry = p1_action.augmentation is Augmentation.PARRY
    p2_has_parry = p2_action.augmentation is Augmentation.PARRY

    if is_parry_throw:
        if p1_has_parry:
            p1_taken -= 1
        if p2_has_parry:
            p2_taken -= 1

    p1_next_stagger = is_parry_throw and p2_has_parry and not p1_stagger
    p2_next_stagger = is_parry_throw and p1_has_parry and not p2_stagger

    # Eligibility only looks at this round's exchange
    p1_continues_combo = p2_taken >= p1_taken
    p2_continues_combo = p1_taken >= p2_taken

    p1_damage = p1_taken
    p2_damage = p2_taken
    if p2_combo and p2_action.augmentation is Augmentation.COMBO:
        p1_damage *= 2
    if p1_combo and p1_action.augmentation is Augmentation.COMBO:
        p2_damage *= 2

    return Outcome(
        p1_action=p1_action,
        p1_outcome=PlayerOutcome(
            damage=p1_damage,
            next_combo=p1_continues_combo,
            next_stagger=p1_next_stagger,
        ),
        p2_action=p2_action,
        p2_outcome=PlayerOutcome(
            damage=p2_damage,
            next_combo=p2_continues_combo,
            next_stagger=p2_next_stagger,
        ),
    )
