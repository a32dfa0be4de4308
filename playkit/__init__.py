"""Building blocks for geometry, collisions, ray casting, particles, UI events and actors."""

__version__ = "0.1.0"

__all__ = [
    "actor",
    "bubblesort",
    "collisions",
    "elements",
    "filtermap",
    "intersect",
    "mesh3d",
    "mover",
    "raycast",
    "rect",
    "sparks",
    "trees",
    "vec2",
    "vector",
    "wire",
    "world",
]