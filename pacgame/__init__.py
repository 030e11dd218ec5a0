"""A maze-chasing arcade game built on pygame: entities, maps, screens and the game loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]