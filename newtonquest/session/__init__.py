"""
Session Module - Drives one play-through.

A session:
- Restores the saved state on start
- Exposes a view of the current scene for presentation
- Accepts the player's choice and persists the result
- Resets to a new game on request
"""

from .manager import Session, SceneView, ChoiceView, ChoiceUnavailable

__all__ = [
    "Session",
    "SceneView",
    "ChoiceView",
    "ChoiceUnavailable",
]
