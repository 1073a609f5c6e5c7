# voxelfortress

Building blocks for the world model of a voxel game, with no graphics
attached. The package provides chunked voxel storage, a quadtree index for
chunk columns, heightmap terrain generation and a free-flying spectator
camera that produces view and projection matrices.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Modules

- `voxelfortress.chunk_segment` holds `VoxelType` (`AIR`, `STONE`, `DIRT`,
  `GRASS`), the frozen dataclass `Voxel` (`id`, `light`) and `ChunkSegment`.
  A `ChunkSegment` is a 32×32×32 cube of voxels. A new segment starts dirty,
  which means it needs remeshing. `set_voxel` marks it dirty again only when
  the voxel id changes, and `mark_dirty(False)` clears the flag. Reading
  outside the segment returns air. Writing outside it raises `IndexError`.
  `is_empty`, `are_coordinates_valid`, `index` and `dimension` complete the
  interface.
- `voxelfortress.chunk_column` holds `ChunkColumn`, a vertical stack of
  segments whose base corner is at world `(x, z)`. It starts with
  `CHUNKS_PER_COLUMN` (8) segments. `get_voxel` and `set_voxel` take world
  coordinates. Heights outside the column read as air, and writes to them are
  ignored. `get_or_create_segment` adds segments at any index. The static
  helpers `world_y_to_segment_y_index` and `world_to_local_segment_coords`
  convert coordinates.
- `voxelfortress.quadtree` holds `AABB2D`, an inclusive integer rectangle,
  together with `QuadtreeNode` and `Quadtree`. They index objects by integer
  XZ position and support `insert`, `remove`, `find` and `query_region`.
- `voxelfortress.world_generator` holds `smooth_value_noise`, a deterministic
  noise function with values in 0…1, and `WorldGenerator`. The generator fills
  a segment with a grass surface, three layers of dirt and stone below, and
  air above. It takes any `noise(x, y, z)` callable in place of the default.
- `voxelfortress.camera` holds `SpectatorCamera` and the `look_at` and
  `perspective` matrix helpers. Keyboard movement stays on the horizontal
  plane. Mouse pitch is clamped to ±89° unless that is turned off.

## Example

```python
from voxelfortress.camera import SpectatorCamera
from voxelfortress.chunk_column import ChunkColumn
from voxelfortress.chunk_segment import Voxel, VoxelType
from voxelfortress.quadtree import AABB2D, Quadtree
from voxelfortress.world_generator import WorldGenerator

column = ChunkColumn(0, 0)
generator = WorldGenerator()
for index, segment in column.segments():
    # world_x and world_z are the column base; world_y is the segment index
    generator.generate_chunk_segment(segment, column.x, index, column.z)

column.set_voxel(10, 5, 20, Voxel(VoxelType.DIRT))
assert column.get_voxel(10, 5, 20).id == VoxelType.DIRT
assert column.get_voxel(0, 1000, 0).id == VoxelType.AIR  # above the column

index = Quadtree(AABB2D(-1000, -1000, 1000, 1000))
index.insert(0, 0, column)
assert index.find(0, 0) is column
assert index.query_region(AABB2D(-10, -10, 10, 10)) == [column]

camera = SpectatorCamera()
camera.process_mouse(50.0, -20.0)
camera.process_keyboard(0.016, forward=True)
clip_from_world = camera.projection_matrix() @ camera.view_matrix()
```

The matrices are 4×4 `numpy` arrays that follow the OpenGL conventions:
right-handed coordinates, clip-space depth in −1…1, and points multiplied as
`matrix @ [x, y, z, 1]`.

## What this package does not do

The package has no object that owns a whole world. Nothing here keeps a map
of columns, creates them on first touch, or loads and unloads them around the
camera. The caller does that with `ChunkColumn`, `WorldGenerator` and
`Quadtree`. There is also no meshing, rendering, window, input handling, game
loop, or saving to disk. `ChunkSegment` only tracks the dirty flag and has a
`mesh` attribute for the caller to fill.

## Running the tests

```
pytest
```