"""Interactive Rock Paper Paradise for CLI.

Play a campaign against AI opponents in the terminal.
"""

import argparse
import logging
import os
import random
from typing import Optional

from src.combat.outcome import Outcome
from src.core.campaign import Campaign, Phase
from src.core.element import Element


def clear_screen():
    """Clear the terminal screen."""
    os.system('cls' if os.name == 'nt' else 'clear')


def print_header(text: str, char: str = "="):
    """Print a formatted header."""
    print(f"\n{char * 60}")
    print(f"  {text}")
    print(f"{char * 60}")


def print_divider(char: str = "-"):
    """Print a divider line."""
    print(char * 60)


def format_element(campaign: Campaign, element: Element) -> str:
    """Element name with its augmentation and aspect, if any."""
    loadout = campaign.player.loadout
    parts = [str(element)]
    augmentation = loadout.augmentations.get(element)
    if augmentation is not None:
        parts.append(f"[{augmentation}]")
    aspect = loadout.enchantments.get(element)
    if aspect is not None:
        parts.append(f"({aspect})")
    return " ".join(parts)


def format_outcome(outcome: Outcome) -> str:
    """One-line summary of a resolved round."""
    line = (
        f"{outcome.p1_action.guess} vs {outcome.p2_action.guess}: "
        f"you take {outcome.p1_outcome.damage}, enemy takes {outcome.p2_outcome.damage}"
    )
    if outcome.p1_outcome.next_stagger:
        line += " | You are staggered!"
    if outcome.p2_outcome.next_stagger:
        line += " | Enemy is staggered!"
    return line


class InteractiveGame:
    """Interactive campaign with CLI interface."""

    def __init__(self, seed: Optional[int] = None, clear: bool = True):
        """
        Initialize the game.

        Args:
            seed: Random seed for the campaign.
            clear: Clear the screen between battles.
        """
        self.seed = seed if seed is not None else random.randint(0, 999999)
        self.campaign = Campaign(seed=self.seed)
        self.clear = clear
        self.running = True

    def run(self):
        """Run the main game loop, offering a retry after each campaign."""
        self.print_welcome()

        while self.running:
            while self.running and not self.campaign.is_over:
                if self.campaign.phase is Phase.IN_GAME:
                    self.handle_battle_round()
                elif self.campaign.phase is Phase.PROVIDING_BONUS:
                    self.handle_bonus_phase()

            if not self.running:
                break
            self.show_game_over()
            if not self.ask_retry():
                break
            self.start_new_campaign()

    def ask_retry(self) -> bool:
        """Ask whether to start a fresh campaign."""
        choice = input("\nTry again? (y/n): ").strip().lower()
        return choice in ("y", "yes")

    def start_new_campaign(self):
        """Replace the finished campaign with a fresh one."""
        self.seed = random.randint(0, 999999)
        self.campaign = Campaign(seed=self.seed)
        print_header("NEW CAMPAIGN", "*")
        print(f"  Seed: {self.seed}")

    def print_welcome(self):
        """Print welcome message."""
        print_header("Rock Paper Paradise", "*")
        print("\n  Welcome! Defeat an opponent at every level to win.")
        print(f"  Seed: {self.seed}")
        print("\n  Commands during battle:")
        print("    [1-7]  - Throw one of your elements")
        print("    [t]    - Show the payout table for your elements")
        print("    [q]    - Quit game")
        print_divider()

    def print_status(self):
        """Print the battle status."""
        campaign = self.campaign
        print_header(f"ROUND {campaign.round} - LEVEL {campaign.level}")
        print(f"  Your HP:  {campaign.player.health}")
        print(f"  Enemy HP: {campaign.opponent.health}")
        enemy = ", ".join(str(e) for e in campaign.opponent.loadout.sorted_elements())
        print(f"  Enemy elements: {enemy}")
        side = campaign.battle.side_of(campaign.player)
        if side.has_combo:
            print("  You have Combo.")
        if side.is_staggered:
            print(f"  You are staggered and must repeat {side.guess}.")
        print_divider()

    def print_table(self):
        """Print payouts of each owned element against the enemy's elements."""
        campaign = self.campaign
        enemy_elements = campaign.opponent.loadout.sorted_elements()
        for element in campaign.player.loadout.sorted_elements():
            print(f"\n  {format_element(campaign, element)}")
            for line in campaign.table.describe_payouts(element, enemy_elements):
                print(f"      {line}")

    def handle_battle_round(self):
        """Handle one round of the current battle."""
        campaign = self.campaign
        self.print_status()

        side = campaign.battle.side_of(campaign.player)
        if side.guess is None:
            owned = campaign.player.loadout.sorted_elements()
            for i, element in enumerate(owned):
                print(f"  [{i+1}] {format_element(campaign, element)}")

            while True:
                choice = input(f"\nThrow (1-{len(owned)}): ").strip().lower()
                if choice == 'q':
                    self.running = False
                    return
                if choice == 't':
                    self.print_table()
                    continue
                try:
                    idx = int(choice) - 1
                except ValueError:
                    print("Enter a number!")
                    continue
                if 0 <= idx < len(owned) and campaign.set_guess(owned[idx]):
                    break
                print("Invalid choice!")

        outcome = campaign.tick()
        if outcome is not None:
            print(f"\n  {format_outcome(outcome)}")

        if campaign.phase is Phase.PROVIDING_BONUS:
            print("\n  Enemy defeated!")

    def handle_bonus_phase(self):
        """Handle bonus or evolution selection."""
        campaign = self.campaign
        upgrades = campaign.upgrades
        if self.clear:
            clear_screen()
        print_header(f"BONUS SELECTION - ROUND {campaign.round}")

        print("\nBonuses:")
        for i, (bonus, element) in enumerate(upgrades.bonuses):
            print(f"  [{i+1}] {bonus.get_readable_name()} on {element}")
            print(f"      {bonus.get_description(element)}")

        offset = len(upgrades.bonuses)
        if upgrades.evolutions:
            print("\nEvolutions (adds the element and raises the level):")
            for i, element in enumerate(upgrades.evolutions):
                print(f"  [{offset+i+1}] {element}")

        total = offset + len(upgrades.evolutions)
        while True:
            choice = input(f"\nChoose (1-{total}): ").strip().lower()
            if choice == 'q':
                self.running = False
                return
            try:
                idx = int(choice) - 1
            except ValueError:
                print("Enter a number!")
                continue
            if 0 <= idx < offset and campaign.select_bonus(idx):
                break
            if offset <= idx < total and campaign.select_evolution(
                upgrades.evolutions[idx - offset]
            ):
                break
            print("Invalid choice!")

    def show_game_over(self):
        """Show the final result."""
        summary = self.campaign.summary()
        print_header("VICTORY" if summary.is_victory else "GAME OVER", "*")
        print(f"\n  {summary.message}")
        print(f"  Final level: {summary.level}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Play Rock Paper Paradise")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Log round details")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    game = InteractiveGame(seed=args.seed)
    game.run()


if __name__ == "__main__":
    main()
