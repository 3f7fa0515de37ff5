"""VBO-backed triangle mesh with an optional wireframe overlay.

Uses the fixed-function pipeline. Vertex data is uploaded once
(STATIC_DRAW) and drawn with glDrawArrays(GL_TRIANGLES, ...).
"""

from __future__ import annotations

import ctypes
from dataclasses import dataclass, field

from OpenGL.GL import (
    glGenBuffers,
    glBindBuffer,
    glBufferData,
    glDeleteBuffers,
    glEnableClientState,
    glDisableClientState,
    glVertexPointer,
    glNormalPointer,
    glColorPointer,
    glTexCoordPointer,
    glDrawArrays,
    glEnable,
    glDisable,
    glIsEnabled,
    glColor3f,
    glPolygonMode,
    glPolygonOffset,
    glColorMaterial,
    GL_ARRAY_BUFFER,
    GL_STATIC_DRAW,
    GL_FLOAT,
    GL_TRIANGLES,
    GL_VERTEX_ARRAY,
    GL_NORMAL_ARRAY,
    GL_COLOR_ARRAY,
    GL_TEXTURE_COORD_ARRAY,
    GL_LIGHTING,
    GL_COLOR_MATERIAL,
    GL_AMBIENT_AND_DIFFUSE,
    GL_FRONT_AND_BACK,
    GL_FILL,
    GL_LINE,
    GL_POLYGON_OFFSET_FILL,
)

from core.drawable import Material
from core.mesh_data import (
    FLOATS_PER_VERTEX,
    NORMAL_OFFSET,
    COLOR_OFFSET,
    UV_OFFSET,
    compute_flat_normals,
    interleave_vertices,
)


@dataclass
class TriangleMesh:
    vbo_vertices: int
    vertex_count: int
    material: Material = field(default_factory=Material)

    @classmethod
    def from_arrays(cls, positions, uvs, material: Material) -> "TriangleMesh":
        """Compute flat normals and upload one interleaved VBO."""
        normals = compute_flat_normals(positions)
        vertex_data = interleave_vertices(positions, normals, material.color, uvs)
        vbo = glGenBuffers(1)
        glBindBuffer(GL_ARRAY_BUFFER, vbo)
        glBufferData(GL_ARRAY_BUFFER, vertex_data.nbytes, vertex_data, GL_STATIC_DRAW)
        glBindBuffer(GL_ARRAY_BUFFER, 0)
        return cls(
            vbo_vertices=vbo, vertex_count=vertex_data.shape[0], material=material
        )

    def _bind_arrays(self, with_color: bool):
        stride = FLOATS_PER_VERTEX * 4  # float32
        glBindBuffer(GL_ARRAY_BUFFER, self.vbo_vertices)
        glEnableClientState(GL_VERTEX_ARRAY)
        glVertexPointer(3, GL_FLOAT, stride, None)
        glEnableClientState(GL_NORMAL_ARRAY)
        glNormalPointer(GL_FLOAT, stride, ctypes.c_void_p(NORMAL_OFFSET * 4))
        glEnableClientState(GL_TEXTURE_COORD_ARRAY)
        glTexCoordPointer(2, GL_FLOAT, stride, ctypes.c_void_p(UV_OFFSET * 4))
        if with_color:
            glEnableClientState(GL_COLOR_ARRAY)
            glColorPointer(3, GL_FLOAT, stride, ctypes.c_void_p(COLOR_OFFSET * 4))

    def _unbind_arrays(self):
        glDisableClientState(GL_COLOR_ARRAY)
        glDisableClientState(GL_TEXTURE_COORD_ARRAY)
        glDisableClientState(GL_NORMAL_ARRAY)
        glDisableClientState(GL_VERTEX_ARRAY)
        glBindBuffer(GL_ARRAY_BUFFER, 0)

    def draw(self):  # pragma: no cover - visual
        if self.vertex_count == 0:
            return

        # Filled, lit surface. Per-vertex colour drives the material.
        glEnable(GL_COLOR_MATERIAL)
        glColorMaterial(GL_FRONT_AND_BACK, GL_AMBIENT_AND_DIFFUSE)
        self._bind_arrays(with_color=True)
        if self.material.wireframe:
            # Push filled faces back a little so the edge pass wins the depth test
            glEnable(GL_POLYGON_OFFSET_FILL)
            glPolygonOffset(1.0, 1.0)
        glDrawArrays(GL_TRIANGLES, 0, self.vertex_count)
        glDisable(GL_POLYGON_OFFSET_FILL)
        glDisable(GL_COLOR_MATERIAL)
        self._unbind_arrays()

        if self.material.wireframe:
            lit = glIsEnabled(GL_LIGHTING)
            glDisable(GL_LIGHTING)
            glColor3f(*self.material.wireframe_color)
            self._bind_arrays(with_color=False)
            glPolygonMode(GL_FRONT_AND_BACK, GL_LINE)
            glDrawArrays(GL_TRIANGLES, 0, self.vertex_count)
            glPolygonMode(GL_FRONT_AND_BACK, GL_FILL)
            self._unbind_arrays()
            if lit:
                glEnable(GL_LIGHTING)

    def release(self):
        if self.vbo_vertices:
            glDeleteBuffers(1, [self.vbo_vertices])
            self.vbo_vertices = 0
            self.vertex_count = 0
