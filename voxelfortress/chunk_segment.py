"""Fixed-size cubic block of voxels, the unit of storage and meshing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

import numpy as np

logger = logging.getLogger(__name__)


class VoxelType(IntEnum):
    """Block materials known to the world."""

    AIR = 0
    STONE = 1
    DIRT = 2
    GRASS = 3


@dataclass(frozen=True)
class Voxel:
    """A single voxel: a material id and a light level."""

    id: int = VoxelType.AIR
    light: int = 0


AIR_VOXEL = Voxel(VoxelType.AIR)


class ChunkSegment:
    """A 32x32x32 block of voxels with dirty tracking for remeshing."""

    CHUNK_WIDTH = 32
    CHUNK_HEIGHT = 32
    CHUNK_DEPTH = 32
    VOLUME = CHUNK_WIDTH * CHUNK_HEIGHT * CHUNK_DEPTH

    def __init__(self, initial_voxel: Optional[Voxel] = None) -> None:
        voxel = AIR_VOXEL if initial_voxel is None else initial_voxel
        self._ids = np.full(self.VOLUME, int(voxel.id), dtype=np.uint8)
        self._light = np.full(self.VOLUME, int(voxel.light), dtype=np.uint8)
        self._dirty = True
        self.is_rebuilding_mesh = False
        self.generated = False
        self.mesh: Any = None

    def get_voxel(self, x: int, y: int, z: int) -> Voxel:
        """Return the voxel at local coordinates; air when out of bounds."""
        if not self.are_coordinates_valid(x, y, z):
            return AIR_VOXEL
        i = self.index(x, y, z)
        return Voxel(int(self._ids[i]), int(self._light[i]))

    def set_voxel(self, x: int, y: int, z: int, voxel: Voxel) -> None:
        """Store a voxel; marks the segment dirty only if the id changes."""
        if not self.are_coordinates_valid(x, y, z):
            raise IndexError("Voxel coordinates are out of segment bounds.")
        i = self.index(x, y, z)
        if int(self._ids[i]) != int(voxel.id):
            self._ids[i] = int(voxel.id)
            self._light[i] = int(voxel.light)
            self.mark_dirty()

    def mark_dirty(self, dirty: bool = True) -> None:
        """Set or clear the flag that says the mesh needs rebuilding."""
        if dirty:
            if self._dirty:
                return
            if self.is_rebuilding_mesh:
                logger.error(
                    "mark_dirty(True) called during mesh rebuild; "
                    "this may cause a feedback loop."
                )
        self._dirty = dirty

    def is_dirty(self) -> bool:
        return self._dirty

    def is_empty(self) -> bool:
        """True when every voxel is air."""
        return bool(np.all(self._ids == int(VoxelType.AIR)))

    @classmethod
    def are_coordinates_valid(cls, x: int, y: int, z: int) -> bool:
        return (
            0 <= x < cls.CHUNK_WIDTH
            and 0 <= y < cls.CHUNK_HEIGHT
            and 0 <= z < cls.CHUNK_DEPTH
        )

    @classmethod
    def index(cls, x: int, y: int, z: int) -> int:
        """Flat storage index for local coordinates (x major, z minor)."""
        return x * (cls.CHUNK_HEIGHT * cls.CHUNK_DEPTH) + y * cls.CHUNK_DEPTH + z

    @classmethod
    def dimension(cls, axis: int) -> int:
        """Size along axis 0 (x), 1 (y) or 2 (z)."""
        sizes = (cls.CHUNK_WIDTH, cls.CHUNK_HEIGHT, cls.CHUNK_DEPTH)
        if axis not in (0, 1, 2):
            raise ValueError("Invalid axis for dimension. Must be 0, 1, or 2.")
        return sizes[axis]