"""
Newton Super Adventure scene content.

Authored in the same format as external content files and built
through the same loader, so it gets the same validation.
"""

from ...scene_schema import SceneGraph, graph_from_mapping

NEWTON_SCENES = {
    "start": "start",
    "death": "graveyard",
    "scenes": {
        "graveyard": {
            "title": "FAIL!!",
            "text": "You died horribly. Your family would be so ashamed of how crappy you are.",
            "links": [],
        },
        "start": {
            "title": "The beginning",
            "text": "Let's embark on a terribly exciting adventure woo! Where do you want to go?",
            "links": [
                {"text": "West", "to": "deadend"},
                {"text": "East", "to": "road"},
                {"text": "Pick up sword", "gain": "sword", "ifhasnt": "sword"},
            ],
        },
        "deadend": {
            "title": "End of the road",
            "text": "The road ends, nothing here. Boooring!",
            "links": [
                {"text": "Go back", "to": "start"},
            ],
        },
        "road": {
            "title": "Trudging on",
            "text": "You are on a dusty road. There is a snake by the road",
            "links": [
                {"text": "Pet snake", "damage": 3},
                {"text": "Chop snake", "ifhas": "sword", "to": "roaddeadsnake"},
            ],
        },
        "roaddeadsnake": {
            "title": "Trudging on a dead snake",
            "text": "You are on a dusty road with a dead snake on it.",
            "links": [],
        },
    },
}


def create_newton_graph() -> SceneGraph:
    """Build the validated Newton Super Adventure graph."""
    return graph_from_mapping(NEWTON_SCENES)
