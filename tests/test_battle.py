"""Tests for battles between two players."""

import pytest

from src.combat.battle import Battle
from src.core.element import Element, ElementTable
from src.core.loadout import Aspect, Augmentation, Loadout
from src.core.player import Player


@pytest.fixture
def player():
    return Player.human()


@pytest.fixture
def enemy():
    return Player.opponent(Loadout([Element.ROCK, Element.PAPER, Element.SCISSORS]))


@pytest.fixture
def battle(player, enemy):
    return Battle(player, enemy, ElementTable())


class TestGuesses:
    """Test guess submission."""

    def test_accepts_owned(self, battle, player):
        """Test an owned element is accepted once."""
        assert battle.set_guess(player, Element.ROCK)
        assert not battle.set_guess(player, Element.PAPER)
        assert battle.side_of(player).guess is Element.ROCK

    def test_rejects_unowned(self, battle, player):
        """Test an unowned element is rejected."""
        assert not battle.set_guess(player, Element.FIRE)
        assert battle.side_of(player).guess is None

    def test_not_ready_without_both(self, battle, player):
        """Test throw_hands waits for both guesses."""
        battle.set_guess(player, Element.ROCK)
        assert not battle.is_ready()
        assert battle.throw_hands() is None
        assert battle.rounds_played == 0

    def test_side_of_stranger(self, battle):
        """Test looking up a player outside the battle."""
        with pytest.raises(ValueError):
            battle.side_of(Player.human("Stranger"))

    def test_opponent_of(self, battle, player, enemy):
        """Test opponent lookup."""
        assert battle.opponent_of(player) is enemy
        assert battle.opponent_of(enemy) is player


class TestThrowHands:
    """Test round resolution."""

    def test_round_applies_damage(self, battle, player, enemy):
        """Test Rock beating Scissors damages the enemy."""
        battle.set_guess(player, Element.ROCK)
        battle.set_guess(enemy, Element.SCISSORS)
        outcome = battle.throw_hands()

        assert outcome is not None
        assert enemy.health == 4
        assert player.health == 25
        assert player.total_damage_dealt == 1
        assert battle.rounds_played == 1
        assert battle.last_outcome is outcome

    def test_guesses_cleared(self, battle, player, enemy):
        """Test guesses are cleared after a round."""
        battle.set_guess(player, Element.ROCK)
        battle.set_guess(enemy, Element.SCISSORS)
        battle.throw_hands()
        assert battle.side_of(player).guess is None
        assert battle.side_of(enemy).guess is None

    def test_combo_marker_tracks_winner(self, battle, player, enemy):
        """Test the round winner carries the Combo marker."""
        battle.set_guess(player, Element.ROCK)
        battle.set_guess(enemy, Element.SCISSORS)
        battle.throw_hands()
        assert battle.side_of(player).has_combo
        assert not battle.side_of(enemy).has_combo

        # Losing the next exchange clears it
        battle.set_guess(player, Element.ROCK)
        battle.set_guess(enemy, Element.PAPER)
        battle.throw_hands()
        assert not battle.side_of(player).has_combo
        assert battle.side_of(enemy).has_combo

    def test_combo_doubles_in_battle(self, battle, player, enemy):
        """Test a chained Combo win deals double damage."""
        player.loadout.augment(Element.ROCK, Augmentation.COMBO)
        for _ in range(2):
            battle.set_guess(player, Element.ROCK)
            battle.set_guess(enemy, Element.SCISSORS)
            battle.throw_hands()
        # 1 on the first win, 2 on the second
        assert enemy.health == 2


class TestStagger:
    """Test forced repeats after a Parry."""

    @pytest.fixture
    def parried(self, battle, player, enemy):
        enemy.loadout.augment(Element.PAPER, Augmentation.PARRY)
        battle.set_guess(player, Element.PAPER)
        battle.set_guess(enemy, Element.PAPER)
        battle.throw_hands()
        return battle

    def test_staggered_guess_is_forced(self, parried, player):
        """Test the staggered player must repeat their throw."""
        side = parried.side_of(player)
        assert side.is_staggered
        assert side.guess is Element.PAPER
        assert not parried.set_guess(player, Element.ROCK)

    def test_parry_heals(self, parried, enemy):
        """Test Parry heals above starting health."""
        assert enemy.health == 6

    def test_forced_round_resolves(self, parried, player, enemy):
        """Test the forced guess is thrown and the stagger wears off."""
        parried.set_guess(enemy, Element.ROCK)
        outcome = parried.throw_hands()
        assert outcome.p1_action.guess is Element.PAPER
        side = parried.side_of(player)
        assert not side.is_staggered
        assert side.guess is None
        assert enemy.health == 5


class TestGameOver:
    """Test battle-over detection."""

    def test_running(self, battle):
        """Test no result while both are alive."""
        assert battle.detect_game_over() is None
        assert not battle.is_over

    def test_winner(self, battle, player, enemy):
        """Test the survivor wins and the battle stops accepting guesses."""
        enemy.health = 1
        battle.set_guess(player, Element.ROCK)
        battle.set_guess(enemy, Element.SCISSORS)
        battle.throw_hands()

        result = battle.detect_game_over()
        assert result.winner is player
        assert not result.is_draw
        assert battle.detect_game_over() is result
        assert not battle.set_guess(player, Element.ROCK)
        assert battle.throw_hands() is None

    def test_draw(self):
        """Test both falling together is a draw."""
        player = Player.human(loadout=Loadout([Element.ROCK]))
        player.loadout.enchant(Element.ROCK, Aspect(Element.WATER))
        enemy = Player.opponent(Loadout([Element.AIR]))
        enemy.loadout.enchant(Element.AIR, Aspect(Element.FIRE))
        player.health = 2
        enemy.health = 2

        battle = Battle(player, enemy, ElementTable())
        battle.set_guess(player, Element.ROCK)
        battle.set_guess(enemy, Element.AIR)
        battle.throw_hands()

        result = battle.detect_game_over()
        assert result.is_draw
        assert result.winner is None
