"""World package: re-export the ground builder and scene setup.

Callers can import public names from `world` directly, e.g.:

    from world import build_ground_mesh, populate_scene
"""

from .tiled_ground import (
    MapParams,
    DEFAULT_MAP,
    TILE_COUNT,
    VERTICES_PER_TILE,
    GroundMeshBuffer,
    tile_corners,
    iter_tiles,
    footprint_bounds,
    uv_for,
    triangulate_tile,
    build_ground_mesh,
)
from .ground_scene import setup_camera, setup_lighting, setup_plane, populate_scene

__all__ = [
    "MapParams",
    "DEFAULT_MAP",
    "TILE_COUNT",
    "VERTICES_PER_TILE",
    "GroundMeshBuffer",
    "tile_corners",
    "iter_tiles",
    "footprint_bounds",
    "uv_for",
    "triangulate_tile",
    "build_ground_mesh",
    "setup_camera",
    "setup_lighting",
    "setup_plane",
    "populate_scene",
]
