r"""Procedural ground made of four folded quad tiles.

The ground is a 2x2 block of square tiles. Every tile has exactly one raised
corner and all four raised corners meet at the inner vertex of the block, so
the surface reads as a low tent with a crease along each tile diagonal:

    (+,-)      (+.+)   (+,-)      (+.+)
      a -------- d       a -------- d
      | \        |       |        / |
      |   \      |       |      /   |
      |     \    |       |    /     |
      |       \  |       |  /       |
      b -------- c       b -------- c
    (-.-)      (-.+)   (-.-)      (-.+)

Each tile is triangulated as (1, 2, 3) + (3, 4, 1) over its corners in
emission order, so the fold is always the corner-1/corner-3 diagonal. Tiles
that emit ``b, c, d, a`` instead of ``a, b, c, d`` fold along the other
diagonal, which gives the alternating pattern above.

Geometry is produced into plain numpy buffers; nothing here touches OpenGL.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np
from pygame.math import Vector3

TILE_COUNT = 4
VERTICES_PER_TILE = 6

UV = Tuple[float, float]


@dataclass(frozen=True)
class MapParams:
    """Fixed footprint constants shared by every tile of the mesh.

    Parameters
    ----------
    map_side_len : float
        Total span of the square ground footprint along one axis. Used as the
        UV normalisation length.
    min_x : float
        Minimum x/z coordinate of the footprint; ``|min_x|`` re-centres
        positions before normalising them into UVs.
    """

    map_side_len: float = 10.0
    min_x: float = -5.0

    def __post_init__(self):
        if not math.isfinite(self.map_side_len) or self.map_side_len <= 0:
            raise ValueError(
                f"map_side_len must be a positive finite number, got {self.map_side_len!r}"
            )
        if not math.isfinite(self.min_x):
            raise ValueError(f"min_x must be finite, got {self.min_x!r}")

    @property
    def tile_side_step(self) -> float:
        # Half of one tile's side length
        return self.map_side_len / 2.0 / 2.0

    @property
    def tile_width(self) -> float:
        return self.tile_side_step * 2.0


DEFAULT_MAP = MapParams()


@dataclass(frozen=True)
class TileRule:
    col: int  # offset along +x, in tile widths
    row: int  # offset along +z, in tile widths
    raised: int  # 0..3 -> a, b, c, d
    rotated: bool  # emit b, c, d, a instead of a, b, c, d


# Tile 0 sits on the origin, the others walk +x, then -z, then back -x.
TILE_RULES: Tuple[TileRule, ...] = (
    TileRule(col=0, row=0, raised=0, rotated=False),
    TileRule(col=1, row=0, raised=1, rotated=True),
    TileRule(col=1, row=-1, raised=2, rotated=False),
    TileRule(col=0, row=-1, raised=3, rotated=True),
)

# Base corner signs in the x/z plane, in a, b, c, d order
_CORNER_SIGNS = ((1.0, -1.0), (-1.0, -1.0), (-1.0, 1.0), (1.0, 1.0))


def tile_corners(tile_index: int, params: MapParams = DEFAULT_MAP) -> Tuple[Vector3, ...]:
    """Return the four corners of a tile in emission order."""
    if not 0 <= tile_index < len(TILE_RULES):
        raise IndexError(
            f"tile_index must be in [0, {len(TILE_RULES)}), got {tile_index}"
        )
    rule = TILE_RULES[tile_index]
    step = params.tile_side_step
    off_x = rule.col * params.tile_width
    off_z = rule.row * params.tile_width

    corners = []
    for i, (sx, sz) in enumerate(_CORNER_SIGNS):
        y = step if i == rule.raised else 0.0
        corners.append(Vector3(off_x + sx * step, y, off_z + sz * step))

    if rule.rotated:
        corners = corners[1:] + corners[:1]
    return tuple(corners)


def iter_tiles(params: MapParams = DEFAULT_MAP) -> Iterator[Tuple[Vector3, ...]]:
    for i in range(len(TILE_RULES)):
        yield tile_corners(i, params)


def footprint_bounds(params: MapParams = DEFAULT_MAP) -> Tuple[float, float, float, float]:
    """(min_x, max_x, min_z, max_z) of the union of all tile projections."""
    xs = []
    zs = []
    for corners in iter_tiles(params):
        xs.extend(p.x for p in corners)
        zs.extend(p.z for p in corners)
    return min(xs), max(xs), min(zs), max(zs)


def uv_for(point: Vector3, params: MapParams = DEFAULT_MAP) -> UV:
    # u follows z and v follows x so the texture lies the right way round
    shift = abs(params.min_x)
    return (
        (point.z + shift) / params.map_side_len,
        (point.x + shift) / params.map_side_len,
    )


def triangulate_tile(
    a: Vector3,
    b: Vector3,
    c: Vector3,
    d: Vector3,
    params: MapParams = DEFAULT_MAP,
) -> Tuple[List[Tuple[float, float, float]], List[UV]]:
    """Split a quad into (a, b, c) and (c, d, a).

    Returns six positions and six UVs, index aligned. The winding decides
    which way the flat normals face, so the order must not change.
    """
    #    a          a -------- d
    #    | \          \        |
    #    |   \          \      |
    #    |     \          \    |
    #    b ---- c           \  |
    #                          c
    order = (a, b, c, c, d, a)
    positions = [(p.x, p.y, p.z) for p in order]
    uvs = [uv_for(p, params) for p in order]
    return positions, uvs


@dataclass
class GroundMeshBuffer:
    positions: np.ndarray  # (N, 3) float32
    uvs: np.ndarray  # (N, 2) float32

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def triangle_count(self) -> int:
        return self.vertex_count // 3

    def triangles(self) -> Iterator[Tuple[np.ndarray, np.ndarray, np.ndarray]]:
        for i in range(0, self.vertex_count, 3):
            yield self.positions[i], self.positions[i + 1], self.positions[i + 2]

    def tile_slice(self, tile_index: int) -> slice:
        start = tile_index * VERTICES_PER_TILE
        return slice(start, start + VERTICES_PER_TILE)


def build_ground_mesh(params: MapParams = DEFAULT_MAP) -> GroundMeshBuffer:
    """Build the triangle list for all tiles, in tile order."""
    total_vertices = TILE_COUNT * VERTICES_PER_TILE
    positions = np.zeros((total_vertices, 3), dtype=np.float32)
    uvs = np.zeros((total_vertices, 2), dtype=np.float32)

    vertex_idx = 0
    for corners in iter_tiles(params):
        tile_positions, tile_uvs = triangulate_tile(*corners, params=params)
        positions[vertex_idx:vertex_idx + VERTICES_PER_TILE] = tile_positions
        uvs[vertex_idx:vertex_idx + VERTICES_PER_TILE] = tile_uvs
        vertex_idx += VERTICES_PER_TILE

    return GroundMeshBuffer(positions=positions, uvs=uvs)
