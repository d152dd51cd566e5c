"""
Pytest fixtures for Newton Quest tests.
"""

import pytest

from ..scene_schema import SceneGraph, Scene, Link
from ..engine_core.state import PlayerState, initial_state
from ..persistence import MemoryStore
from ..session import Session
from ..games.newton import create_newton_graph


@pytest.fixture
def newton_graph() -> SceneGraph:
    """The bundled adventure."""
    return create_newton_graph()


@pytest.fixture
def start_state() -> PlayerState:
    """A brand new game."""
    return initial_state()


@pytest.fixture
def road_state() -> PlayerState:
    """Standing on the road with full health and nothing in hand."""
    return PlayerState(scene_id="road", health=10)


@pytest.fixture
def armed_road_state() -> PlayerState:
    """Standing on the road holding the sword."""
    return PlayerState(scene_id="road", health=10, inventory=frozenset({"sword"}))


@pytest.fixture
def store() -> MemoryStore:
    """An empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def session(newton_graph, store) -> Session:
    """A session on the bundled adventure with no save."""
    return Session.start(newton_graph, store)


@pytest.fixture
def guard_graph() -> SceneGraph:
    """A hub scene whose links exercise every guard and effect."""
    return SceneGraph(
        scenes={
            "start": Scene(
                scene_id="start",
                title="Hub",
                body="A room with a locked door and a fountain.",
                links=(
                    Link(text="Take key", gain="key", requires_absent="key"),
                    Link(text="Open door", requires_present="key", lose="key", target="hall"),
                    Link(text="Drink", damage=-5),
                    Link(text="Touch spikes", damage=4),
                    Link(text="Swap key for lamp", requires_present="key", requires_absent="lamp",
                         lose="key", gain="lamp"),
                    Link(text="Leap", damage=100, target="hall"),
                ),
            ),
            "hall": Scene(
                scene_id="hall",
                title="Hall",
                body="A long hall.",
                links=(Link(text="Back", target="start"),),
            ),
            "graveyard": Scene(scene_id="graveyard", title="Dead", body="The end."),
        },
    )
