"""
Configuration - Environment settings shared by the CLI and the HTTP app.

    NEWTON_ENV           development / production label
    NEWTON_SCENES_FILE   JSON scene content (default: bundled adventure)
    NEWTON_SAVE_DIR      directory for the save file
    ALLOWED_ORIGINS      comma-separated CORS origins for the HTTP app

Command-line flags and create_app() arguments take precedence.
"""

from __future__ import annotations
import os
from pathlib import Path

from .scene_schema import SceneGraph, load_scene_graph
from .persistence import FileStore

NEWTON_ENV = os.getenv("NEWTON_ENV", "development")
NEWTON_SCENES_FILE = os.getenv("NEWTON_SCENES_FILE") or None
NEWTON_SAVE_DIR = os.getenv("NEWTON_SAVE_DIR") or str(Path.home() / ".newtonquest" / "saves")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")


def build_graph(scenes_file: str | Path | None = None) -> SceneGraph:
    """Load external scene content, or the bundled adventure if none is set."""
    scenes_file = scenes_file or NEWTON_SCENES_FILE
    if scenes_file:
        return load_scene_graph(scenes_file)

    from .games.newton import create_newton_graph
    return create_newton_graph()


def build_store(save_dir: str | Path | None = None) -> FileStore:
    """File store rooted at the configured save directory."""
    return FileStore(save_dir or NEWTON_SAVE_DIR)
