"""A brick-breaking arcade game built on a small state machine, with a pygame front end."""

__version__ = "1.0.0"
__all__ = ["smile", "constants", "geometry", "assets", "entities", "game", "app"]