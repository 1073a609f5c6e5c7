"""Heightmap terrain generation driven by smooth value noise."""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from voxelfortress.chunk_segment import ChunkSegment, Voxel, VoxelType

logger = logging.getLogger(__name__)

NoiseFunction = Callable[[float, float, float], float]

_MASK32 = 0xFFFFFFFF


def _lattice_value(ix: int, iy: int, iz: int) -> float:
    """Deterministic pseudo-random value in [0, 1] for an integer lattice point."""
    n = (ix * 374761393 + iy * 668265263 + iz * 1274126177) & _MASK32
    n = ((n ^ (n >> 13)) * 1274126177) & _MASK32
    n ^= n >> 16
    return n / _MASK32


def _fade(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def smooth_value_noise(x: float, y: float, z: float) -> float:
    """Continuous value noise in [0, 1], smoothly interpolated between lattice points."""
    x0, y0, z0 = math.floor(x), math.floor(y), math.floor(z)
    tx, ty, tz = _fade(x - x0), _fade(y - y0), _fade(z - z0)

    def plane(iz: int) -> float:
        bottom = _lerp(_lattice_value(x0, y0, iz), _lattice_value(x0 + 1, y0, iz), tx)
        top = _lerp(_lattice_value(x0, y0 + 1, iz), _lattice_value(x0 + 1, y0 + 1, iz), tx)
        return _lerp(bottom, top, ty)

    return _lerp(plane(z0), plane(z0 + 1), tz)


class WorldGenerator:
    """Fills chunk segments with grass-topped terrain from a 2D height field."""

    NOISE_INPUT_SCALE = 0.08
    TERRAIN_AMPLITUDE = ChunkSegment.CHUNK_HEIGHT * 1.5
    BASE_TERRAIN_OFFSET = ChunkSegment.CHUNK_HEIGHT / 8.0
    DIRT_DEPTH = 3

    def __init__(self, noise: Optional[NoiseFunction] = None) -> None:
        self.noise: NoiseFunction = smooth_value_noise if noise is None else noise

    def column_height(self, global_x: int, global_z: int) -> int:
        """World height of the grass surface at a world XZ position."""
        nx = global_x * self.NOISE_INPUT_SCALE
        nz = global_z * self.NOISE_INPUT_SCALE
        value = self.noise(nx, 0.0, nz)
        return int(value * self.TERRAIN_AMPLITUDE) + int(self.BASE_TERRAIN_OFFSET)

    def _material(self, global_y: int, height: int) -> VoxelType:
        if global_y > height:
            return VoxelType.AIR
        if global_y == height:
            return VoxelType.GRASS
        if global_y > height - self.DIRT_DEPTH:
            return VoxelType.DIRT
        return VoxelType.STONE

    def generate_chunk_segment(
        self, segment: ChunkSegment, world_x: int, world_y: int, world_z: int
    ) -> None:
        """Fill a segment.

        ``world_x`` and ``world_z`` are the world coordinates of the column's
        base corner; ``world_y`` is the segment's index within the column.
        """
        height_span = ChunkSegment.CHUNK_HEIGHT
        base_y = world_y * height_span
        if (world_x, world_y, world_z) == (0, 0, 0):
            logger.debug("Generating segment at indices (0, 0, 0)")
        voxels = {t: Voxel(t) for t in VoxelType}
        for x in range(ChunkSegment.CHUNK_WIDTH):
            for z in range(ChunkSegment.CHUNK_DEPTH):
                height = self.column_height(world_x + x, world_z + z)
                for y in range(height_span):
                    material = self._material(base_y + y, height)
                    segment.set_voxel(x, y, z, voxels[material])