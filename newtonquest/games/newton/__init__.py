"""
Newton Super Adventure - The bundled adventure.

A short walk down a dusty road:
- Pick up a sword at the start
- Pet the snake on the road and lose health
- Or chop it, if you brought the sword
- Run out of health and end up in the graveyard
"""

from .scenes import NEWTON_SCENES, create_newton_graph

__all__ = [
    "NEWTON_SCENES",
    "create_newton_graph",
]
