"""
API Service - Business logic layer between the HTTP app and the engine.

The service:
1. Owns the single play-through Session
2. Translates requests into session calls
3. Formats session views as response models

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
import logging

from .schemas import SceneResponse, ChoiceInfo
from ..scene_schema import SceneGraph
from ..persistence import KeyValueStore, MemoryStore
from ..session import Session, SceneView
from ..games.newton import create_newton_graph

logger = logging.getLogger(__name__)


class APIService:
    """
    Main API service.

    Usage:
        service = APIService(graph=graph, store=FileStore())

        response = service.get_scene()
        response = service.choose(response.choices[0].index)
    """

    def __init__(
        self,
        graph: SceneGraph | None = None,
        store: KeyValueStore | None = None,
    ):
        self.graph = graph or create_newton_graph()
        self.store = store if store is not None else MemoryStore()
        self._session: Session | None = None

    @property
    def session(self) -> Session:
        """The play-through, restored from the store on first use."""
        if self._session is None:
            self._session = Session.start(self.graph, self.store)
        return self._session

    def get_scene(self) -> SceneResponse:
        """Current scene, health, inventory and visible choices."""
        return self._view_to_response(self.session.view())

    def choose(self, index: int) -> SceneResponse:
        """
        Pick a choice and return the scene it leads to.

        Raises ChoiceUnavailable for a hidden or unknown index.
        """
        result = self.session.choose(index)
        return self._view_to_response(self.session.view(), changes=result.changes)

    def reset(self) -> SceneResponse:
        """Start a new game."""
        self.session.reset()
        return self._view_to_response(self.session.view())

    def _view_to_response(
        self, view: SceneView, changes: list[str] | None = None
    ) -> SceneResponse:
        return SceneResponse(
            scene_id=view.scene_id,
            title=view.title,
            body=view.body,
            health=view.health,
            inventory=view.inventory,
            choices=[ChoiceInfo(index=c.index, text=c.text) for c in view.choices],
            is_terminal=view.is_terminal,
            is_dead=view.is_dead,
            changes=changes or [],
        )
