"""
Session - One running play-through.

LIFECYCLE:
1. Start: restore the saved state (a new game if nothing is saved,
   a reset if the save is corrupt)
2. Each choice: resolve the link -> save -> caller redraws from view()
3. Reset: replace the state with a new game; not persisted until the
   next choice

The session is the single owner of the PlayerState. Nothing else
mutates it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from ..scene_schema import SceneGraph, Scene
from ..engine_core import PlayerState, Resolver, TransitionResult, visible_choices
from ..persistence import KeyValueStore, CorruptSave, reset, restore, save

logger = logging.getLogger(__name__)


class ChoiceUnavailable(Exception):
    """Raised when the player picks a choice the active scene doesn't show."""

    def __init__(self, scene_id: str, index: int):
        self.scene_id = scene_id
        self.index = index
        super().__init__(f"Choice {index} is not available in scene '{scene_id}'")


@dataclass
class ChoiceView:
    """A visible choice, with the index the input adapter sends back."""
    index: int
    text: str


@dataclass
class SceneView:
    """Everything a presentation layer needs to draw the current scene."""
    scene_id: str
    title: str
    body: str
    health: int
    inventory: list[str]
    choices: list[ChoiceView] = field(default_factory=list)
    is_terminal: bool = False
    is_dead: bool = False


class Session:
    """
    A single-player play-through bound to a scene graph and a store.

    Usage:
        session = Session.start(graph, FileStore())

        view = session.view()
        # ... draw view, wait for the player ...
        session.choose(view.choices[0].index)
    """

    def __init__(
        self,
        graph: SceneGraph,
        store: KeyValueStore,
        state: PlayerState | None = None,
        resolver: Resolver | None = None,
    ):
        self.graph = graph
        self.store = store
        self.resolver = resolver or Resolver(graph=graph)
        self.state = state if state is not None else reset(graph.start_scene_id)
        self.last_result: TransitionResult | None = None

    @classmethod
    def start(cls, graph: SceneGraph, store: KeyValueStore) -> Session:
        """
        Create a session from whatever the store holds.

        A corrupt save falls back to a new game. The corrupt record stays
        in the store until the first choice overwrites it.
        """
        try:
            state = restore(store, graph)
        except CorruptSave as e:
            logger.warning(f"Ignoring corrupt save ({e}); starting a new game")
            state = reset(graph.start_scene_id)
        return cls(graph=graph, store=store, state=state)

    @property
    def scene(self) -> Scene:
        """The active scene."""
        return self.graph.scene(self.state.scene_id)

    def view(self) -> SceneView:
        """Build the presentation view of the current state."""
        scene = self.scene
        return SceneView(
            scene_id=scene.scene_id,
            title=scene.title,
            body=scene.body,
            health=self.state.health,
            inventory=sorted(self.state.inventory),
            choices=[
                ChoiceView(index=index, text=link.text)
                for index, link in visible_choices(scene, self.state)
            ],
            is_terminal=scene.is_terminal,
            is_dead=self.state.scene_id == self.graph.death_scene_id,
        )

    def choose(self, index: int) -> TransitionResult:
        """
        Apply the active scene's link at declaration index `index`, then save.

        Raises:
            ChoiceUnavailable: the index is out of range or the link is hidden
        """
        scene = self.scene
        available = dict(visible_choices(scene, self.state))
        link = available.get(index)
        if link is None:
            raise ChoiceUnavailable(scene.scene_id, index)

        result = self.resolver.apply(self.state, link)
        self.state = result.new_state
        self.last_result = result
        save(self.store, self.state)

        logger.debug(
            f"'{link.text}' in '{scene.scene_id}' -> '{self.state.scene_id}' "
            f"(health {self.state.health}): {', '.join(result.changes) or 'no changes'}"
        )
        if result.died:
            logger.info(f"Player died in scene '{scene.scene_id}'")
        return result

    def reset(self) -> PlayerState:
        """Start over. The new state is saved with the next choice."""
        self.state = reset(self.graph.start_scene_id)
        self.last_result = None
        logger.info("Session reset to a new game")
        return self.state
