"""
Transition Resolver - Computes the next PlayerState for a chosen link.

The resolver is the single point of state mutation.
All progress goes through resolve().

Effects apply in a fixed order, which decides precedence when one link
carries several of them:
1. Tentative next scene := link.target (None means stay)
2. Gain item
3. Lose item
4. Damage: health := max(0, health - damage); negative damage heals
   with no upper bound
5. Health below 1 forces the death scene, whatever the target said
6. Move if a next scene was determined
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .state import PlayerState
from ..scene_schema.scene_graph import DEFAULT_DEATH_SCENE_ID

if TYPE_CHECKING:
    from ..scene_schema import Link, SceneGraph


class InvalidLinkOwnership(Exception):
    """Raised when a link is resolved outside the scene that declares it."""

    def __init__(self, scene_id: str, link_text: str):
        self.scene_id = scene_id
        self.link_text = link_text
        super().__init__(f"Link '{link_text}' does not belong to scene '{scene_id}'")


def resolve(
    state: PlayerState,
    link: Link,
    death_scene_id: str = DEFAULT_DEATH_SCENE_ID,
) -> PlayerState:
    """
    Apply a link to the player state.

    Pure and total: the caller guarantees `link` belongs to the active
    scene and that its target exists (checked when the graph was built).
    """
    next_scene_id = link.target
    new_state = state

    if link.gain:
        new_state = new_state.with_item(link.gain)

    if link.lose:
        new_state = new_state.without_item(link.lose)

    if link.damage is not None:
        new_state = new_state._copy_with(health=max(0, new_state.health - link.damage))

    if new_state.health < 1:
        next_scene_id = death_scene_id

    if next_scene_id:
        new_state = new_state._copy_with(scene_id=next_scene_id)

    return new_state


@dataclass
class TransitionResult:
    """
    Result of resolving a link.

    Contains the new state plus human-readable changes for presentation.
    """
    new_state: PlayerState
    changes: list[str] = field(default_factory=list)
    died: bool = False


@dataclass
class Resolver:
    """
    Resolver bound to a scene graph.

    Stateless - all state is in PlayerState.
    The graph supplies the death scene id and, when check_ownership is
    on, the scene the link must belong to.
    """
    graph: SceneGraph
    check_ownership: bool = __debug__

    def resolve(self, state: PlayerState, link: Link) -> PlayerState:
        """Resolve a link, checking ownership first if enabled."""
        if self.check_ownership:
            self._check_ownership(state, link)
        return resolve(state, link, self.graph.death_scene_id)

    def apply(self, state: PlayerState, link: Link) -> TransitionResult:
        """Resolve a link and describe what happened."""
        new_state = self.resolve(state, link)
        died = (
            new_state.health < 1
            and new_state.scene_id == self.graph.death_scene_id
        )
        return TransitionResult(
            new_state=new_state,
            changes=_describe_changes(state, new_state, link),
            died=died,
        )

    def _check_ownership(self, state: PlayerState, link: Link):
        scene = self.graph.scenes.get(state.scene_id)
        if scene is None or not scene.owns(link):
            raise InvalidLinkOwnership(state.scene_id, link.text)


def _describe_changes(old: PlayerState, new: PlayerState, link: Link) -> list[str]:
    """
    List the visible effects of a transition, in resolution order.

    Health is reported as the link's own damage, not the clamped delta:
    petting a snake at 1 health reads "Took 3 damage".
    """
    changes = []
    for item in sorted(new.inventory - old.inventory):
        changes.append(f"Gained {item}")
    for item in sorted(old.inventory - new.inventory):
        changes.append(f"Lost {item}")

    damage = link.damage or 0
    if damage > 0:
        changes.append(f"Took {damage} damage")
    elif damage < 0:
        changes.append(f"Recovered {-damage} health")

    if new.scene_id != old.scene_id:
        changes.append(f"Moved to {new.scene_id}")
    return changes
