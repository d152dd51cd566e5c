"""
Newton Quest - Interactive Fiction Engine

A small, deterministic engine for choice-driven text adventures.
The engine loads a scene graph (static narrative content) and provides:
- Eager validation of scene content
- Player state (position, health, inventory)
- Deterministic transition resolution
- Link visibility filtering
- Single-slot save/restore against a key-value store
"""

__version__ = "0.1.0"
