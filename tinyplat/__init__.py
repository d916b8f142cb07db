"""Game logic for a small side-scrolling platformer with swept-AABB collision."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "assets",
    "collision",
    "controls",
    "goomba",
    "mario",
    "objects",
    "scene",
    "simple",
]