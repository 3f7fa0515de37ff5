from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple

import numpy as np

Color3 = Tuple[float, float, float]
Vec3 = Tuple[float, float, float]


@dataclass
class Material:
    color: Color3 = (1.0, 1.0, 1.0)
    # Draw triangle edges on top of the filled surface
    wireframe: bool = False
    wireframe_color: Color3 = (0.0, 0.0, 0.0)


class Drawable(Protocol):
    def draw(self) -> None: ...  # noqa: D401


class SceneCollaborator(Protocol):
    """What scene setup needs from whatever does the rendering."""

    def spawn_mesh(
        self, positions: np.ndarray, uvs: np.ndarray, material: Material
    ) -> Drawable: ...

    def spawn_camera(self, eye: Vec3, target: Vec3) -> object: ...

    def spawn_point_light(self, light) -> object: ...
