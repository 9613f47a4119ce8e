"""A two-player top-down tank shooter: game model, counters and a pygame window."""

__version__ = "0.1.0"
__all__ = ["hud", "entities", "scene", "app"]