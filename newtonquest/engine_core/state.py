"""
Player State - The single mutable record of progress.

Design principles:
- Immutable-friendly: all mutations return new state
- Serializable: round-trips through the save codec
- Owned by one session; never shared
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..scene_schema.scene_graph import DEFAULT_START_SCENE_ID

INITIAL_HEALTH = 10


@dataclass(frozen=True)
class PlayerState:
    """
    Where the player is, how healthy they are, and what they carry.

    Inventory is membership-only: an item is either held or not.
    """
    scene_id: str
    health: int = INITIAL_HEALTH
    inventory: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.health < 0:
            raise ValueError(f"health must be >= 0, got {self.health}")
        if not isinstance(self.inventory, frozenset):
            object.__setattr__(self, "inventory", frozenset(self.inventory))

    def has(self, item: str) -> bool:
        """Check whether an item is held."""
        return item in self.inventory

    def with_item(self, item: str) -> PlayerState:
        """Return new state holding `item`. Holding it already is a no-op."""
        return self._copy_with(inventory=self.inventory | {item})

    def without_item(self, item: str) -> PlayerState:
        """Return new state not holding `item`. Not holding it is a no-op."""
        return self._copy_with(inventory=self.inventory - {item})

    def _copy_with(self, **kwargs) -> PlayerState:
        """Create a copy with some fields replaced."""
        return PlayerState(
            scene_id=kwargs.get("scene_id", self.scene_id),
            health=kwargs.get("health", self.health),
            inventory=kwargs.get("inventory", self.inventory),
        )


def initial_state(start_scene_id: str = DEFAULT_START_SCENE_ID) -> PlayerState:
    """The canonical state of a new game."""
    return PlayerState(scene_id=start_scene_id, health=INITIAL_HEALTH, inventory=frozenset())
