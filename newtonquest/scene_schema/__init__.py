"""Scene schema - narrative graph definitions, validation and loading."""

from .scene_graph import (
    Link,
    Scene,
    SceneGraph,
    DEFAULT_START_SCENE_ID,
    DEFAULT_DEATH_SCENE_ID,
)
from .validation import (
    validate_graph,
    ValidationResult,
    SceneGraphError,
    BrokenReference,
)
from .loader import graph_from_mapping, load_scene_graph

__all__ = [
    "Link",
    "Scene",
    "SceneGraph",
    "DEFAULT_START_SCENE_ID",
    "DEFAULT_DEATH_SCENE_ID",
    "validate_graph",
    "ValidationResult",
    "SceneGraphError",
    "BrokenReference",
    "graph_from_mapping",
    "load_scene_graph",
]
