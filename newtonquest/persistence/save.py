"""
Save Codec - Single-slot persistence of PlayerState.

The save record is JSON under one fixed key:

    {"sceneId": "road", "health": 7, "inventory": {"sword": 1}}

Inventory keys are held items; the values are truthy markers.
The record is written after every resolved transition and read once
at startup. A missing record means a new game.
"""

from __future__ import annotations
import logging
from typing import Any, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from ..engine_core.state import PlayerState, initial_state
from ..scene_schema.scene_graph import DEFAULT_START_SCENE_ID
from .store import KeyValueStore

if TYPE_CHECKING:
    from ..scene_schema import SceneGraph

logger = logging.getLogger(__name__)

SAVE_KEY = "NEWTONGAMESTATE"


class CorruptSave(Exception):
    """Raised when stored data cannot be read back into a PlayerState."""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = errors or []
        super().__init__(message)


class SaveRecord(BaseModel):
    """Wire shape of a saved PlayerState."""
    model_config = ConfigDict(populate_by_name=True)

    scene_id: StrictStr = Field(alias="sceneId", min_length=1)
    health: StrictInt = Field(ge=0)
    inventory: dict[str, Any]

    @classmethod
    def from_state(cls, state: PlayerState) -> SaveRecord:
        return cls(
            scene_id=state.scene_id,
            health=state.health,
            inventory={item: 1 for item in sorted(state.inventory)},
        )

    def to_state(self) -> PlayerState:
        return PlayerState(
            scene_id=self.scene_id,
            health=self.health,
            inventory=frozenset(item for item, marker in self.inventory.items() if marker),
        )


def serialize(state: PlayerState) -> str:
    """Encode a PlayerState as the save record JSON."""
    return SaveRecord.from_state(state).model_dump_json(by_alias=True)


def deserialize(raw: str | bytes, graph: SceneGraph | None = None) -> PlayerState:
    """
    Decode a save record.

    When a graph is given, the saved scene must exist in it.

    Raises:
        CorruptSave: the data is not a valid save record
    """
    try:
        record = SaveRecord.model_validate_json(raw)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or 'record'}: {err['msg']}"
            for err in e.errors()
        ]
        raise CorruptSave("Save record could not be decoded", errors) from e

    if graph is not None and record.scene_id not in graph:
        raise CorruptSave(
            f"Save record points at unknown scene '{record.scene_id}'",
            [f"sceneId: unknown scene '{record.scene_id}'"],
        )
    return record.to_state()


def reset(start_scene_id: str = DEFAULT_START_SCENE_ID) -> PlayerState:
    """
    The canonical initial state.

    Does not touch the store; the caller decides when to persist.
    """
    return initial_state(start_scene_id)


def restore(store: KeyValueStore, graph: SceneGraph | None = None) -> PlayerState:
    """
    Read the saved state, or a fresh one if nothing is saved.

    Raises:
        CorruptSave: a record exists but is malformed
    """
    raw = store.get(SAVE_KEY)
    if not raw:
        logger.info("No save record found, starting a new game")
        return reset(graph.start_scene_id if graph is not None else DEFAULT_START_SCENE_ID)

    state = deserialize(raw, graph)
    logger.info(f"Restored save at scene '{state.scene_id}' with health {state.health}")
    return state


def save(store: KeyValueStore, state: PlayerState):
    """Write the state under the save key, replacing any previous record."""
    store.set(SAVE_KEY, serialize(state))
    logger.debug(f"Saved state at scene '{state.scene_id}'")
