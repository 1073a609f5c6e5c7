"""Vertical stack of chunk segments at one XZ position of the world."""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

from voxelfortress.chunk_segment import AIR_VOXEL, ChunkSegment, Voxel


def _trunc_divmod(a: int, b: int) -> Tuple[int, int]:
    """Quotient rounded toward zero and the remainder that goes with it."""
    q = abs(a) // b
    if a < 0:
        q = -q
    return q, a - q * b


class ChunkColumn:
    """Segments stacked along Y above a column whose base is (x, z) in world units."""

    CHUNKS_PER_COLUMN = 8

    def __init__(self, world_x: int, world_z: int) -> None:
        self.x = world_x
        self.z = world_z
        self._segments: Dict[int, ChunkSegment] = {
            i: ChunkSegment() for i in range(self.CHUNKS_PER_COLUMN)
        }

    @property
    def coordinates(self) -> Tuple[int, int]:
        """World coordinates (x, z) of the column's base corner."""
        return self.x, self.z

    def segments(self) -> Iterator[Tuple[int, ChunkSegment]]:
        """Yield (segment index, segment) pairs in ascending index order."""
        for index in sorted(self._segments):
            yield index, self._segments[index]

    def _locate(self, world_y: int) -> Optional[Tuple[ChunkSegment, int]]:
        index, local_y = _trunc_divmod(world_y, ChunkSegment.CHUNK_HEIGHT)
        if not 0 <= index < self.CHUNKS_PER_COLUMN:
            return None
        segment = self.segment_by_index(index)
        if segment is None:
            return None
        return segment, local_y

    def get_voxel(self, world_x: int, world_y: int, world_z: int) -> Voxel:
        """Voxel at world coordinates; air outside the column's vertical range."""
        found = self._locate(world_y)
        if found is None:
            return AIR_VOXEL
        segment, local_y = found
        return segment.get_voxel(world_x - self.x, local_y, world_z - self.z)

    def set_voxel(self, world_x: int, world_y: int, world_z: int, voxel: Voxel) -> None:
        """Store a voxel at world coordinates.

        Heights whose segment lies outside the column are ignored; coordinates
        that fall outside the addressed segment raise IndexError.
        """
        found = self._locate(world_y)
        if found is None:
            return
        segment, local_y = found
        segment.set_voxel(world_x - self.x, local_y, world_z - self.z, voxel)

    def segment_by_index(self, segment_y_index: int) -> Optional[ChunkSegment]:
        """Segment among the column's fixed range of indices, or None."""
        if not 0 <= segment_y_index < self.CHUNKS_PER_COLUMN:
            return None
        return self._segments.get(segment_y_index)

    def get_segment(self, segment_y_index: int) -> Optional[ChunkSegment]:
        """Segment at any index, or None if it has not been created."""
        return self._segments.get(segment_y_index)

    def get_or_create_segment(self, segment_y_index: int) -> ChunkSegment:
        """Segment at the index, creating an empty one if needed."""
        segment = self._segments.get(segment_y_index)
        if segment is None:
            segment = ChunkSegment()
            self._segments[segment_y_index] = segment
        return segment

    @staticmethod
    def world_y_to_segment_y_index(world_y: int) -> int:
        """Index of the segment holding a world height (floor division)."""
        return world_y // ChunkSegment.CHUNK_HEIGHT

    @staticmethod
    def world_to_local_segment_coords(
        world_x: int,
        world_y: int,
        world_z: int,
        column_world_x: int,
        column_world_z: int,
    ) -> Tuple[int, int, int]:
        """Local (x, y, z) inside a segment, each wrapped into the segment's range."""
        return (
            (world_x - column_world_x) % ChunkSegment.CHUNK_WIDTH,
            world_y % ChunkSegment.CHUNK_HEIGHT,
            (world_z - column_world_z) % ChunkSegment.CHUNK_DEPTH,
        )

    def mark_all_segments_dirty(self) -> None:
        for segment in self._segments.values():
            segment.mark_dirty(True)