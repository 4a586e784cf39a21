"""Tests for the opponent bot."""

import random

import pytest

from src.combat.battle import Battle
from src.core.element import Element, ElementTable
from src.core.loadout import Loadout
from src.core.player import Player
from src.game.bot_ai import BotAI


@pytest.fixture
def enemy():
    return Player.opponent(Loadout([Element.AIR, Element.EARTH, Element.FIRE]))


@pytest.fixture
def battle(enemy):
    return Battle(Player.human(), enemy, ElementTable())


class TestBotAI:
    """Test BotAI functionality."""

    def test_guess_is_owned(self, enemy):
        """Test the bot only throws elements it owns."""
        bot = BotAI(enemy, random.Random(0))
        for _ in range(100):
            assert enemy.loadout.owns(bot.choose_guess())

    def test_uses_every_element(self, enemy):
        """Test the bot eventually throws each owned element."""
        bot = BotAI(enemy, random.Random(0))
        seen = {bot.choose_guess() for _ in range(200)}
        assert seen == enemy.loadout.elements

    def test_seed_reproducible(self, enemy):
        """Test equal seeds give equal guess sequences."""
        first = BotAI(enemy, random.Random(5))
        second = BotAI(enemy, random.Random(5))
        assert [first.choose_guess() for _ in range(20)] == [
            second.choose_guess() for _ in range(20)
        ]

    def test_take_turn(self, battle, enemy):
        """Test the bot places a guess once."""
        bot = BotAI(enemy, random.Random(1))
        guess = bot.take_turn(battle)
        assert guess is not None
        assert battle.side_of(enemy).guess is guess
        assert bot.take_turn(battle) is None

    def test_keeps_forced_guess(self, battle, enemy):
        """Test a staggered bot keeps its forced guess."""
        side = battle.side_of(enemy)
        side.guess = Element.FIRE
        side.is_staggered = True
        assert BotAI(enemy, random.Random(1)).take_turn(battle) is None
        assert side.guess is Element.FIRE

    def test_no_turn_after_battle(self, battle, enemy):
        """Test the bot stays idle once the battle is over."""
        enemy.health = 0
        battle.detect_game_over()
        assert BotAI(enemy, random.Random(1)).take_turn(battle) is None
