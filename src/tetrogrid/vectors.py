"""Small 2D value types used by the shape geometry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, Tuple, TypeVar, Union

T = TypeVar("T", int, float)
A = TypeVar("A")


@dataclass(frozen=True)
class Vector2(Generic[T]):
    """Immutable ``(x, y)`` pair.

    Arithmetic is component-wise and accepts either another vector or a
    scalar applied to both components.  Every operation returns a new
    instance, so ``v += w`` simply rebinds ``v``.
    """

    x: T
    y: T

    @classmethod
    def from_pair(cls, pair: Tuple[T, T]) -> "Vector2[T]":
        x, y = pair
        return cls(x, y)

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y

    def __add__(self, other: Union["Vector2", int, float]) -> "Vector2":
        if isinstance(other, Vector2):
            return Vector2(self.x + other.x, self.y + other.y)
        return Vector2(self.x + other, self.y + other)

    def __sub__(self, other: Union["Vector2", int, float]) -> "Vector2":
        if isinstance(other, Vector2):
            return Vector2(self.x - other.x, self.y - other.y)
        return Vector2(self.x - other, self.y - other)

    def map(self, func: Callable[[T], A]) -> "Vector2[A]":
        """Return a vector with ``func`` applied to both components."""

        return Vector2(func(self.x), func(self.y))

    def convert(self, kind: type) -> "Vector2":
        """Cast both components to ``kind``.

        Narrowing a float to ``int`` truncates toward zero; callers wanting a
        different rounding must map explicitly.
        """

        return self.map(kind)


@dataclass(frozen=True)
class BoundingBox(Generic[T]):
    """Axis-aligned box with inclusive ``start`` and exclusive ``end``."""

    start: Vector2[T]
    end: Vector2[T]

    def __post_init__(self) -> None:
        if self.end.x < self.start.x or self.end.y < self.start.y:
            raise ValueError(f"Box end {self.end} lies before start {self.start}")

    @classmethod
    def around(cls, points: Iterable[Vector2[int]]) -> "BoundingBox[int]":
        """Return the smallest box covering the unit cell of every point.

        Raises:
            ValueError: If ``points`` is empty.
        """

        points = list(points)
        if not points:
            raise ValueError("Cannot compute a bounding box of no points")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(Vector2(min(xs), min(ys)), Vector2(max(xs) + 1, max(ys) + 1))

    def width(self) -> T:
        return self.end.x - self.start.x

    def height(self) -> T:
        return self.end.y - self.start.y

    def dimensions(self) -> Vector2[T]:
        return Vector2(self.width(), self.height())


__all__ = ["Vector2", "BoundingBox"]
