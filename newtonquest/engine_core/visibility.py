"""
Link Visibility - Which choices a scene presents to the player.

A link is visible when:
- it has no requires_present item, or that item is held
- it has no requires_absent item, or that item is not held

Declaration order is the display order and is always preserved.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .state import PlayerState

if TYPE_CHECKING:
    from ..scene_schema import Link, Scene


def is_visible(link: Link, state: PlayerState) -> bool:
    """Check both inventory guards of a link."""
    present_ok = not link.requires_present or state.has(link.requires_present)
    absent_ok = not link.requires_absent or not state.has(link.requires_absent)
    return present_ok and absent_ok


def visible_links(scene: Scene, state: PlayerState) -> list[Link]:
    """The scene's visible links, in declaration order."""
    return [link for link in scene.links if is_visible(link, state)]


def visible_choices(scene: Scene, state: PlayerState) -> list[tuple[int, Link]]:
    """
    Visible links paired with their declaration index.

    The index identifies the link within its scene and is what input
    adapters hand back when the player picks a choice.
    """
    return [
        (index, link)
        for index, link in enumerate(scene.links)
        if is_visible(link, state)
    ]
