"""CPU-side vertex data helpers shared by the GL meshes.

Kept free of OpenGL imports so geometry can be prepared (and tested) before
a context exists.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

# Interleaved layout: [x, y, z, nx, ny, nz, r, g, b, u, v]
FLOATS_PER_VERTEX = 11
POSITION_OFFSET = 0
NORMAL_OFFSET = 3
COLOR_OFFSET = 6
UV_OFFSET = 9


def compute_flat_normals(positions) -> np.ndarray:
    """Per-face normals for a non-indexed triangle list.

    Every vertex of a triangle receives the same unit normal,
    ``normalize(cross(p1 - p0, p2 - p0))``. Degenerate triangles get a zero
    normal.
    """
    pos = np.asarray(positions, dtype=np.float32).reshape(-1, 3)
    if pos.shape[0] % 3 != 0:
        raise ValueError(
            f"triangle list needs a multiple of 3 vertices, got {pos.shape[0]}"
        )

    tris = pos.reshape(-1, 3, 3)
    face = np.cross(tris[:, 1] - tris[:, 0], tris[:, 2] - tris[:, 0])
    lengths = np.linalg.norm(face, axis=1, keepdims=True)
    safe = np.where(lengths > 1e-12, lengths, 1.0)
    face = np.where(lengths > 1e-12, face / safe, 0.0)
    return np.repeat(face, 3, axis=0).astype(np.float32)


def interleave_vertices(
    positions,
    normals,
    color: Sequence[float],
    uvs,
) -> np.ndarray:
    """Pack attributes into one float32 array ready for a VBO upload."""
    pos = np.asarray(positions, dtype=np.float32).reshape(-1, 3)
    nrm = np.asarray(normals, dtype=np.float32).reshape(-1, 3)
    tex = np.asarray(uvs, dtype=np.float32).reshape(-1, 2)
    n = pos.shape[0]
    if nrm.shape[0] != n or tex.shape[0] != n:
        raise ValueError(
            f"attribute length mismatch: positions={n}, normals={nrm.shape[0]}, uvs={tex.shape[0]}"
        )

    vertex_data = np.zeros((n, FLOATS_PER_VERTEX), dtype=np.float32)
    vertex_data[:, POSITION_OFFSET:POSITION_OFFSET + 3] = pos
    vertex_data[:, NORMAL_OFFSET:NORMAL_OFFSET + 3] = nrm
    vertex_data[:, COLOR_OFFSET:COLOR_OFFSET + 3] = tuple(color[:3])
    vertex_data[:, UV_OFFSET:UV_OFFSET + 2] = tex
    return vertex_data
