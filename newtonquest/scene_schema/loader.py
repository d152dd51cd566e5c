"""
Scene Loader - Builds a SceneGraph from authored content.

Content is a JSON document (or the equivalent Python mapping), either a
bare mapping of scene id -> scene, or a wrapper:

    {
        "start": "start",
        "death": "graveyard",
        "scenes": {
            "road": {
                "title": "Trudging on",
                "text": "You are on a dusty road.",
                "links": [
                    {"text": "Pet snake", "damage": 3},
                    {"text": "Chop snake", "ifhas": "sword", "to": "roaddeadsnake"}
                ]
            }
        }
    }

The short keys (`text` for a scene body, `to`, `ifhas`, `ifhasnt`) and the
long keys (`body`, `target`, `requires_present`, `requires_absent`) are
both accepted.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from .scene_graph import (
    Link,
    Scene,
    SceneGraph,
    DEFAULT_START_SCENE_ID,
    DEFAULT_DEATH_SCENE_ID,
)
from .validation import SceneGraphError

logger = logging.getLogger(__name__)

_WRAPPER_KEYS = {"start", "death", "scenes"}


class LinkDocument(BaseModel):
    """A link as authored."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str = Field(min_length=1)
    target: Optional[str] = Field(None, validation_alias=AliasChoices("target", "to"))
    damage: Optional[StrictInt] = None
    gain: Optional[str] = None
    lose: Optional[str] = None
    requires_present: Optional[str] = Field(
        None, validation_alias=AliasChoices("requires_present", "ifhas")
    )
    requires_absent: Optional[str] = Field(
        None, validation_alias=AliasChoices("requires_absent", "ifhasnt")
    )

    @field_validator("target", "gain", "lose", "requires_present", "requires_absent")
    @classmethod
    def _empty_is_absent(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    def to_link(self) -> Link:
        return Link(
            text=self.text,
            target=self.target,
            damage=self.damage,
            gain=self.gain,
            lose=self.lose,
            requires_present=self.requires_present,
            requires_absent=self.requires_absent,
        )


class SceneDocument(BaseModel):
    """A scene as authored."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str
    body: str = Field(validation_alias=AliasChoices("body", "text"))
    links: list[LinkDocument] = Field(default_factory=list)

    def to_scene(self, scene_id: str) -> Scene:
        return Scene(
            scene_id=scene_id,
            title=self.title,
            body=self.body,
            links=tuple(link.to_link() for link in self.links),
        )


class GraphDocument(BaseModel):
    """A complete content document."""
    model_config = ConfigDict(extra="forbid")

    start: str = DEFAULT_START_SCENE_ID
    death: str = DEFAULT_DEATH_SCENE_ID
    scenes: dict[str, SceneDocument]


def graph_from_mapping(
    data: Mapping[str, Any],
    start_scene_id: str | None = None,
    death_scene_id: str | None = None,
) -> SceneGraph:
    """
    Build and validate a SceneGraph from authored content.

    Explicit start/death ids override the ones in the document.

    Raises:
        SceneGraphError: content is structurally malformed
        BrokenReference: a scene id used by the content does not exist
    """
    if not isinstance(data, Mapping):
        raise SceneGraphError([f"Scene content must be an object, got {type(data).__name__}"])

    if _is_wrapper(data):
        payload = dict(data)
    else:
        payload = {"scenes": dict(data)}

    try:
        document = GraphDocument.model_validate(payload)
    except ValidationError as e:
        raise SceneGraphError(_format_errors(e)) from e

    graph = SceneGraph(
        scenes={
            scene_id: scene_doc.to_scene(scene_id)
            for scene_id, scene_doc in document.scenes.items()
        },
        start_scene_id=start_scene_id or document.start,
        death_scene_id=death_scene_id or document.death,
    )
    for warning in graph.warnings:
        logger.warning(f"Scene content: {warning}")
    return graph


def load_scene_graph(
    path: str | Path,
    start_scene_id: str | None = None,
    death_scene_id: str | None = None,
) -> SceneGraph:
    """Load scene content from a JSON file."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SceneGraphError([f"{path}: invalid JSON ({e})"]) from e

    graph = graph_from_mapping(data, start_scene_id, death_scene_id)
    logger.info(f"Loaded {len(graph)} scenes from {path}")
    return graph


def _is_wrapper(data: Mapping[str, Any]) -> bool:
    """Tell a wrapper document apart from a bare scene mapping."""
    return "scenes" in data and set(data.keys()) <= _WRAPPER_KEYS


def _format_errors(error: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    ]
