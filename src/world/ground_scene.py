"""Demo scene setup: camera, point light and the folded ground plane.

Each step only talks to a :class:`core.drawable.SceneCollaborator`, so the
same setup drives the OpenGL scene at runtime and a recording stand-in in
tests.
"""

from __future__ import annotations

import time

from config import (
    CAMERA_EYE,
    CAMERA_TARGET,
    LIGHT_POSITION,
    LIGHT_COLOR,
    LIGHT_INTENSITY,
    LIGHT_RANGE,
    LIGHT_RADIUS,
    GROUND_COLOR,
    WIREFRAME_COLOR,
    MAP_SIDE_LEN,
    MIN_X,
    LOG_TIMING,
)
from core.drawable import Material, SceneCollaborator
from core.lighting import PointLight
from world.tiled_ground import MapParams, build_ground_mesh


def log_timing(message: str, start_time: float, end_time: float, log: bool = LOG_TIMING):
    """Logs timing information for scene setup phases."""
    if log:
        print(f"{message} took {end_time - start_time:.6f} seconds")


def setup_camera(collaborator: SceneCollaborator):
    return collaborator.spawn_camera(CAMERA_EYE, CAMERA_TARGET)


def setup_lighting(collaborator: SceneCollaborator):
    light = PointLight(
        position=LIGHT_POSITION,
        color=LIGHT_COLOR,
        intensity=LIGHT_INTENSITY,
        range=LIGHT_RANGE,
        radius=LIGHT_RADIUS,
    )
    return collaborator.spawn_point_light(light)


def setup_plane(collaborator: SceneCollaborator, params: MapParams | None = None):
    """Build the ground buffer and hand it over as one white, wireframed mesh."""
    params = params or MapParams(map_side_len=MAP_SIDE_LEN, min_x=MIN_X)
    buffer = build_ground_mesh(params)
    material = Material(
        color=GROUND_COLOR, wireframe=True, wireframe_color=WIREFRAME_COLOR
    )
    return collaborator.spawn_mesh(buffer.positions, buffer.uvs, material)


def populate_scene(collaborator: SceneCollaborator, params: MapParams | None = None):
    """Register camera, light and ground on the collaborator; returns the ground."""
    start_time = time.perf_counter()
    setup_camera(collaborator)
    log_timing("Setting up camera", start_time, time.perf_counter())

    start_time = time.perf_counter()
    setup_lighting(collaborator)
    log_timing("Setting up lighting", start_time, time.perf_counter())

    start_time = time.perf_counter()
    print("Generating ground mesh...")
    ground = setup_plane(collaborator, params)
    log_timing("Generating ground mesh", start_time, time.perf_counter())

    print("Scene initialization complete.")
    return ground
