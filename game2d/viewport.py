"""Camera viewport described by a size, a center and a zoom factor."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from game2d.vector import Vector2, VectorAdapter


@dataclass(frozen=True)
class Camera2D:
    """Renderer camera: offset, target, rotation in degrees and zoom."""

    offset: Vector2 = field(default_factory=Vector2)
    target: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    zoom: float = 1.0


class ViewportAdapter:
    """A viewport whose size and center are held as copies of the given vectors."""

    def __init__(self, size: VectorAdapter | None = None, center: VectorAdapter | None = None) -> None:
        self._size = copy.copy(size) if size is not None else VectorAdapter()
        self._center = copy.copy(center) if center is not None else VectorAdapter()
        self._position = copy.copy(self._center)
        self.zoom: float = 1.0

    @property
    def size(self) -> VectorAdapter:
        return self._size

    @size.setter
    def size(self, value: VectorAdapter) -> None:
        self._size = copy.copy(value)

    @property
    def center(self) -> VectorAdapter:
        return self._center

    @center.setter
    def center(self, value: VectorAdapter) -> None:
        self._center = copy.copy(value)

    @property
    def position(self) -> VectorAdapter:
        return self._position

    def reset(self, rect: VectorAdapter) -> None:
        """Replace the viewport size."""
        self._size = copy.copy(rect)

    def to_camera(self) -> Camera2D:
        return Camera2D(
            offset=self._size.to_vector2(),
            target=self._center.to_vector2(),
            rotation=0.0,
            zoom=float(self.zoom),
        )

    def __str__(self) -> str:
        return f"Viewport -> {self._position} {self._center} {self._size}"