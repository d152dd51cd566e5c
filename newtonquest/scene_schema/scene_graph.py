"""
Scene Graph - Immutable narrative data.

The graph is:
- Built once at startup from static content
- Validated eagerly (every link target and the death scene must resolve)
- Read-only afterwards

Scenes own their links. A scene with no links is terminal.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping


DEFAULT_START_SCENE_ID = "start"
DEFAULT_DEATH_SCENE_ID = "graveyard"


@dataclass(frozen=True)
class Link:
    """
    A choice offered by a scene.

    Every field except `text` is optional; None means absent.
    """
    text: str
    target: str | None = None  # Scene to move to
    damage: int | None = None  # Subtracted from health, negative heals
    gain: str | None = None  # Item added to inventory
    lose: str | None = None  # Item removed from inventory
    requires_present: str | None = None  # Item that must be held to see the link
    requires_absent: str | None = None  # Item that must not be held to see the link


@dataclass(frozen=True)
class Scene:
    """A node in the narrative graph."""
    scene_id: str
    title: str
    body: str
    links: tuple[Link, ...] = ()

    @property
    def is_terminal(self) -> bool:
        """A scene with no outgoing links ends the story."""
        return len(self.links) == 0

    def owns(self, link: Link) -> bool:
        """Check whether `link` is declared by this scene."""
        return link in self.links


@dataclass(frozen=True)
class SceneGraph:
    """
    Read-only mapping from scene id to Scene.

    Construction validates the whole graph and raises BrokenReference
    (or SceneGraphError for structural problems) before any player
    can reach a malformed scene.
    """
    scenes: Mapping[str, Scene]
    start_scene_id: str = DEFAULT_START_SCENE_ID
    death_scene_id: str = DEFAULT_DEATH_SCENE_ID
    warnings: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self):
        from .validation import validate_graph, raise_for_result

        # Freeze the mapping so callers can't edit content after validation
        object.__setattr__(self, "scenes", MappingProxyType(dict(self.scenes)))

        result = validate_graph(self)
        raise_for_result(result)
        object.__setattr__(self, "warnings", tuple(result.warnings))

    def scene(self, scene_id: str) -> Scene:
        """Look up a scene, raising BrokenReference if it does not exist."""
        from .validation import BrokenReference

        try:
            return self.scenes[scene_id]
        except KeyError:
            raise BrokenReference([f"Unknown scene '{scene_id}'"]) from None

    @property
    def start_scene(self) -> Scene:
        return self.scenes[self.start_scene_id]

    @property
    def death_scene(self) -> Scene:
        return self.scenes[self.death_scene_id]

    def __contains__(self, scene_id: object) -> bool:
        return scene_id in self.scenes

    def __iter__(self) -> Iterator[Scene]:
        return iter(self.scenes.values())

    def __len__(self) -> int:
        return len(self.scenes)
