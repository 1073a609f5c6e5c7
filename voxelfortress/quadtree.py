"""Quadtree over the XZ plane for locating chunk columns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class AABB2D:
    """Inclusive integer rectangle on the XZ plane."""

    x_min: int
    z_min: int
    x_max: int
    z_max: int

    def contains(self, x: int, z: int) -> bool:
        return self.x_min <= x <= self.x_max and self.z_min <= z <= self.z_max

    def intersects(self, other: "AABB2D") -> bool:
        return not (
            other.x_min > self.x_max
            or other.x_max < self.x_min
            or other.z_min > self.z_max
            or other.z_max < self.z_min
        )


def _midpoint(a: int, b: int) -> int:
    """Midpoint rounded toward zero."""
    total = a + b
    half = abs(total) // 2
    return half if total >= 0 else -half


class QuadtreeNode:
    """One node holding points directly until it splits into four children."""

    MAX_OBJECTS = 8
    MAX_LEVELS = 16

    def __init__(self, bounds: AABB2D, level: int = 0) -> None:
        self.bounds = bounds
        self.level = level
        self.entries: List[Tuple[int, int, Any]] = []
        self.children: Optional[List["QuadtreeNode"]] = None

    def insert(self, x: int, z: int, column: Any) -> None:
        if not self.bounds.contains(x, z):
            return
        if self.children:
            for child in self.children:
                if child.bounds.contains(x, z):
                    child.insert(x, z, column)
                    return
        self.entries.append((x, z, column))
        if len(self.entries) > self.MAX_OBJECTS and self.level < self.MAX_LEVELS:
            if not self.children:
                self.subdivide()
            for ex, ez, ecol in self.entries:
                child = next(
                    (c for c in self.children if c.bounds.contains(ex, ez)), None
                )
                if child is not None:
                    child.insert(ex, ez, ecol)
            self.entries.clear()

    def remove(self, x: int, z: int) -> bool:
        if not self.bounds.contains(x, z):
            return False
        for i, (ex, ez, _) in enumerate(self.entries):
            if ex == x and ez == z:
                del self.entries[i]
                return True
        if self.children:
            return any(child.remove(x, z) for child in self.children)
        return False

    def find(self, x: int, z: int) -> Any:
        if not self.bounds.contains(x, z):
            return None
        for ex, ez, col in self.entries:
            if ex == x and ez == z:
                return col
        if self.children:
            for child in self.children:
                if child.bounds.contains(x, z):
                    return child.find(x, z)
        return None

    def _iter_region(self, region: AABB2D) -> Iterator[Any]:
        if not self.bounds.intersects(region):
            return
        for ex, ez, col in self.entries:
            if region.contains(ex, ez):
                yield col
        if self.children:
            for child in self.children:
                yield from child._iter_region(region)

    def query_region(self, region: AABB2D) -> List[Any]:
        return list(self._iter_region(region))

    def subdivide(self) -> None:
        b = self.bounds
        x_mid = _midpoint(b.x_min, b.x_max)
        z_mid = _midpoint(b.z_min, b.z_max)
        level = self.level + 1
        self.children = [
            QuadtreeNode(AABB2D(b.x_min, b.z_min, x_mid, z_mid), level),
            QuadtreeNode(AABB2D(x_mid + 1, b.z_min, b.x_max, z_mid), level),
            QuadtreeNode(AABB2D(b.x_min, z_mid + 1, x_mid, b.z_max), level),
            QuadtreeNode(AABB2D(x_mid + 1, z_mid + 1, b.x_max, b.z_max), level),
        ]


class Quadtree:
    """Spatial index of objects keyed by integer XZ position."""

    def __init__(self, world_bounds: AABB2D) -> None:
        self.root = QuadtreeNode(world_bounds, 0)

    def insert(self, x: int, z: int, column: Any) -> None:
        self.root.insert(x, z, column)

    def remove(self, x: int, z: int) -> bool:
        return self.root.remove(x, z)

    def find(self, x: int, z: int) -> Any:
        return self.root.find(x, z)

    def query_region(self, region: AABB2D) -> List[Any]:
        return self.root.query_region(region)