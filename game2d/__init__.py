"""Core building blocks for a 2D role-playing game: enums, an event dispatcher, vectors and viewports."""

__version__ = "0.1.0"

__all__ = ["enums", "event", "vector", "viewport"]