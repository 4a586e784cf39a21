"""Player state that persists across battles."""

from typing import Optional

from src.core.constants import ENEMY_MAX_HEALTH, PLAYER_MAX_HEALTH
from src.core.loadout import Loadout


class Player:
    """A campaign participant: health and loadout."""

    def __init__(
        self,
        name: str,
        loadout: Loadout,
        health: int = PLAYER_MAX_HEALTH,
        is_human: bool = False,
    ):
        """
        Initialize a player.

        Args:
            name: Display name.
            loadout: Owned elements and their modifiers.
            health: Starting health.
            is_human: True for the player driven by the host.
        """
        self.name = name
        self.loadout = loadout
        self.health = health
        self.is_human = is_human

        # Stats tracking
        self.total_damage_dealt = 0
        self.total_damage_taken = 0

    @classmethod
    def human(cls, name: str = "Player", loadout: Optional[Loadout] = None) -> "Player":
        return cls(
            name=name,
            loadout=loadout or Loadout.rock_paper_scissors(),
            health=PLAYER_MAX_HEALTH,
            is_human=True,
        )

    @classmethod
    def opponent(cls, loadout: Loadout, name: str = "Enemy") -> "Player":
        return cls(name=name, loadout=loadout, health=ENEMY_MAX_HEALTH)

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def take_damage(self, damage: int) -> int:
        """
        Apply signed damage; negative damage heals.

        Health saturates at 0 and is not capped above.

        Returns:
            Health lost (negative when healed).
        """
        before = self.health
        self.health = max(0, self.health - damage)
        lost = before - self.health
        if lost > 0:
            self.total_damage_taken += lost
        return lost

    def __repr__(self) -> str:
        return f"Player({self.name!r}, hp={self.health}, {self.loadout!r})"
