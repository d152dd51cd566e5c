"""
Scene Graph Validation - Eager checks on narrative content.

Validates that:
1. Every link target names a known scene
2. The start scene and the death scene exist
3. Scene ids and link texts are non-empty
4. Scene keys match the ids of the scenes they hold

Any unresolved id makes the failure a BrokenReference, even when other
structural problems are reported alongside it; those alone are a plain
SceneGraphError. Both reject the whole graph.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .scene_graph import SceneGraph, Scene


class SceneGraphError(Exception):
    """Raised when scene content is malformed."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(
            f"Scene graph rejected with {len(errors)} error(s): " + "; ".join(errors)
        )


class BrokenReference(SceneGraphError):
    """Raised when a scene id used by the content does not resolve."""


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]
    broken_references: list[str]


def validate_graph(graph: SceneGraph) -> ValidationResult:
    """
    Validate a complete scene graph.

    Returns ValidationResult; use raise_for_result() to turn it into
    an exception.
    """
    errors: list[str] = []
    warnings: list[str] = []
    broken: list[str] = []

    scene_ids = set(graph.scenes.keys())

    if not graph.scenes:
        errors.append("Scene graph has no scenes")

    if graph.start_scene_id not in scene_ids:
        broken.append(f"Start scene '{graph.start_scene_id}' does not exist")
    if graph.death_scene_id not in scene_ids:
        broken.append(f"Death scene '{graph.death_scene_id}' does not exist")

    for key, scene in graph.scenes.items():
        errors.extend(_validate_scene(key, scene))
        broken.extend(_validate_targets(scene, scene_ids))

    death_scene = graph.scenes.get(graph.death_scene_id)
    if death_scene is not None and not death_scene.is_terminal:
        warnings.append(
            f"Death scene '{graph.death_scene_id}' has outgoing links"
        )

    return ValidationResult(
        valid=not errors and not broken,
        errors=errors,
        warnings=warnings,
        broken_references=broken,
    )


def raise_for_result(result: ValidationResult):
    """Raise the matching exception for a failed validation."""
    if result.broken_references:
        raise BrokenReference(result.errors + result.broken_references)
    if result.errors:
        raise SceneGraphError(result.errors)


def _validate_scene(key: str, scene: Scene) -> list[str]:
    """Validate a single scene's own fields."""
    errors = []
    if not scene.scene_id:
        errors.append("Scene has empty ID")
    elif scene.scene_id != key:
        errors.append(f"Scene '{scene.scene_id}' is stored under key '{key}'")

    for i, link in enumerate(scene.links):
        if not link.text:
            errors.append(f"Scene '{scene.scene_id}': link {i} has empty text")
    return errors


def _validate_targets(scene: Scene, scene_ids: set[str]) -> list[str]:
    """Check every link target in a scene resolves."""
    broken = []
    for i, link in enumerate(scene.links):
        if link.target is not None and link.target not in scene_ids:
            broken.append(
                f"Scene '{scene.scene_id}': link {i} ('{link.text}') "
                f"targets unknown scene '{link.target}'"
            )
    return broken
