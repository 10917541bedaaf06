"""Two-dimensional integer vector with an optional grid row and column."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_COORDS_MASK = 0xFFFF
_POSITION_MASK = 0xFF


def _coords(value: int) -> int:
    return int(value) & _COORDS_MASK


def _position(value: int) -> int:
    return int(value) & _POSITION_MASK


@dataclass(frozen=True)
class Vector2:
    """Floating-point 2D vector as used by the renderer."""

    x: float = 0.0
    y: float = 0.0


class VectorAdapter:
    """Unsigned 16-bit coordinates plus an 8-bit row and column.

    Arithmetic applies to the coordinates only and wraps like unsigned
    16-bit integers; division is integer division.
    """

    __slots__ = ("horizontal", "vertical", "row", "column")
    __hash__ = None  # mutable

    def __init__(self, horizontal: int = 0, vertical: int = 0, row: int = 0, column: int = 0) -> None:
        self.horizontal = _coords(horizontal)
        self.vertical = _coords(vertical)
        self.row = _position(row)
        self.column = _position(column)

    @classmethod
    def from_vector2(cls, vector: Vector2) -> "VectorAdapter":
        """Build from a floating-point vector, truncating its components."""
        return cls(int(vector.x), int(vector.y))

    def to_vector2(self) -> Vector2:
        return Vector2(float(self.horizontal), float(self.vertical))

    def _operands(self, other: Union["VectorAdapter", int]) -> tuple[int, int] | None:
        if isinstance(other, VectorAdapter):
            return other.horizontal, other.vertical
        if isinstance(other, int) and not isinstance(other, bool):
            value = _coords(other)
            return value, value
        return None

    def _apply(self, other, operation, in_place: bool):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        target = self if in_place else VectorAdapter(self.horizontal, self.vertical, self.row, self.column)
        target.horizontal = _coords(operation(target.horizontal, operands[0]))
        target.vertical = _coords(operation(target.vertical, operands[1]))
        return target

    def __add__(self, other):
        return self._apply(other, lambda a, b: a + b, False)

    def __sub__(self, other):
        return self._apply(other, lambda a, b: a - b, False)

    def __mul__(self, other):
        return self._apply(other, lambda a, b: a * b, False)

    def __truediv__(self, other):
        return self._apply(other, lambda a, b: a // b, False)

    def __iadd__(self, other):
        return self._apply(other, lambda a, b: a + b, True)

    def __isub__(self, other):
        return self._apply(other, lambda a, b: a - b, True)

    def __imul__(self, other):
        return self._apply(other, lambda a, b: a * b, True)

    def __itruediv__(self, other):
        return self._apply(other, lambda a, b: a // b, True)

    def __eq__(self, other) -> bool:
        if not isinstance(other, VectorAdapter):
            return NotImplemented
        return (
            self.horizontal == other.horizontal
            and self.vertical == other.vertical
            and self.row == other.row
            and self.column == other.column
        )

    def __repr__(self) -> str:
        return (
            f"VectorAdapter(horizontal={self.horizontal}, vertical={self.vertical}, "
            f"row={self.row}, column={self.column})"
        )

    def __str__(self) -> str:
        return f"VA -> H:{self.horizontal} V:{self.vertical} R:{self.row} C:{self.column}"