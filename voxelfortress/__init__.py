"""Chunked voxel storage, quadtree index, terrain generation and spectator camera."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "chunk_column",
    "chunk_segment",
    "quadtree",
    "world_generator",
]