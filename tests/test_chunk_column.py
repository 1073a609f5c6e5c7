import pytest
from hypothesis import given, strategies as st

from voxelfortress.chunk_column import ChunkColumn
from voxelfortress.chunk_segment import AIR_VOXEL, ChunkSegment, Voxel, VoxelType

H = ChunkSegment.CHUNK_HEIGHT


def test_new_column_has_fixed_segments_of_air():
    column = ChunkColumn(64, -32)
    assert column.coordinates == (64, -32)
    indices = [i for i, _ in column.segments()]
    assert indices == list(range(ChunkColumn.CHUNKS_PER_COLUMN))
    assert all(seg.is_empty() for _, seg in column.segments())
    assert column.get_voxel(64, 0, -32) == AIR_VOXEL


def test_set_get_round_trip_uses_world_coordinates():
    column = ChunkColumn(64, -32)
    stone = Voxel(VoxelType.STONE)
    column.set_voxel(70, H + 5, -30, stone)
    assert column.get_voxel(70, H + 5, -30) == stone
    assert column.get_segment(1).get_voxel(6, 5, 2) == stone
    assert column.get_segment(0).is_empty()


def test_height_above_column_is_ignored():
    column = ChunkColumn(0, 0)
    top = ChunkColumn.CHUNKS_PER_COLUMN * H
    column.set_voxel(0, top, 0, Voxel(VoxelType.DIRT))
    assert column.get_voxel(0, top, 0) == AIR_VOXEL
    assert column.get_segment(ChunkColumn.CHUNKS_PER_COLUMN) is None


def test_far_negative_height_is_ignored_and_reads_air():
    column = ChunkColumn(0, 0)
    column.set_voxel(0, -2 * H, 0, Voxel(VoxelType.DIRT))
    assert column.get_voxel(0, -2 * H, 0) == AIR_VOXEL
    assert column.get_voxel(0, -1, 0) == AIR_VOXEL


def test_slightly_negative_height_raises():
    column = ChunkColumn(0, 0)
    with pytest.raises(IndexError):
        column.set_voxel(0, -1, 0, Voxel(VoxelType.DIRT))


def test_x_outside_column_raises_on_set_and_reads_air():
    column = ChunkColumn(32, 0)
    with pytest.raises(IndexError):
        column.set_voxel(31, 0, 0, Voxel(VoxelType.STONE))
    assert column.get_voxel(31, 0, 0) == AIR_VOXEL


def test_segment_by_index_bounds():
    column = ChunkColumn(0, 0)
    assert column.segment_by_index(0) is column.get_segment(0)
    assert column.segment_by_index(ChunkColumn.CHUNKS_PER_COLUMN) is None
    assert column.segment_by_index(-1) is None


def test_get_or_create_segment_creates_once():
    column = ChunkColumn(0, 0)
    assert column.get_segment(-3) is None
    created = column.get_or_create_segment(-3)
    assert column.get_segment(-3) is created
    assert column.get_or_create_segment(-3) is created
    assert column.get_or_create_segment(0) is column.segment_by_index(0)
    # Indices outside the fixed range are not reachable through segment_by_index.
    assert column.segment_by_index(-3) is None


def test_mark_all_segments_dirty():
    column = ChunkColumn(0, 0)
    extra = column.get_or_create_segment(-1)
    for _, seg in column.segments():
        seg.mark_dirty(False)
    assert not any(seg.is_dirty() for _, seg in column.segments())
    column.mark_all_segments_dirty()
    assert all(seg.is_dirty() for _, seg in column.segments())
    assert extra.is_dirty()


@given(st.integers(min_value=-10**9, max_value=10**9))
def test_world_y_to_segment_index_brackets_height(world_y):
    index = ChunkColumn.world_y_to_segment_y_index(world_y)
    assert index * H <= world_y < (index + 1) * H


@given(
    st.integers(-10**6, 10**6),
    st.integers(-10**6, 10**6),
    st.integers(-10**6, 10**6),
    st.integers(-10**6, 10**6),
    st.integers(-10**6, 10**6),
)
def test_local_segment_coords_wrap_into_range(wx, wy, wz, cx, cz):
    lx, ly, lz = ChunkColumn.world_to_local_segment_coords(wx, wy, wz, cx, cz)
    assert ChunkSegment.are_coordinates_valid(lx, ly, lz)
    assert (wx - cx - lx) % ChunkSegment.CHUNK_WIDTH == 0
    assert (wy - ly) % H == 0
    assert (wz - cz - lz) % ChunkSegment.CHUNK_DEPTH == 0