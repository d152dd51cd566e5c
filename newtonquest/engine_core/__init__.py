"""
Engine Core - Deterministic player state management and transition resolution.

The engine is the runtime that:
1. Holds the PlayerState
2. Filters a scene's links down to the visible ones
3. Resolves a chosen link into the next PlayerState
"""

from .state import PlayerState, initial_state, INITIAL_HEALTH
from .resolver import Resolver, TransitionResult, InvalidLinkOwnership, resolve
from .visibility import is_visible, visible_links, visible_choices

__all__ = [
    "PlayerState",
    "initial_state",
    "INITIAL_HEALTH",
    "Resolver",
    "TransitionResult",
    "InvalidLinkOwnership",
    "resolve",
    "is_visible",
    "visible_links",
    "visible_choices",
]
