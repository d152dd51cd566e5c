"""
Games module - Bundled adventures.

Each adventure has its own subpackage with its scene content and a
factory that builds the validated SceneGraph.
"""
