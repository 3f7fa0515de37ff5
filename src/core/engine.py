"""Window, GL state and main loop.

The engine owns the pygame window and the frame loop; everything that is
drawn lives on a GLScene populated by world.ground_scene.
"""

from __future__ import annotations

import pygame
from OpenGL.GL import (
    glEnable,
    glDisable,
    glClear,
    glClearColor,
    glDepthFunc,
    GL_DEPTH_TEST,
    GL_LEQUAL,
    GL_CULL_FACE,
    GL_MULTISAMPLE,
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_BUFFER_BIT,
)

from config import *
from core.scene import GLScene
from world.ground_scene import populate_scene


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self):
        pygame.init()
        pygame.display.gl_set_attribute(pygame.GL_DEPTH_SIZE, 24)
        if MSAA_SAMPLES > 0:
            pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLEBUFFERS, 1)
            pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLESAMPLES, MSAA_SAMPLES)
        pygame.display.set_caption("Broken Plane")
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        if FULLSCREEN:
            flags |= pygame.FULLSCREEN
        try:
            # vsync: 1 to enable, 0 to disable
            pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
        except pygame.error:
            # vsync was requested but is unavailable on this system/driver
            pygame.display.set_mode((WIDTH, HEIGHT), flags)
        self.clock = pygame.time.Clock()

        # GL state
        glEnable(GL_DEPTH_TEST)
        glDepthFunc(GL_LEQUAL)
        # Tiles are folded, so back faces can face the camera
        glDisable(GL_CULL_FACE)
        if MSAA_SAMPLES > 0:
            glEnable(GL_MULTISAMPLE)
        glClearColor(*CLEAR_COLOR)

        self.scene = GLScene()
        populate_scene(self.scene)

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
        return True

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        self.scene.render()
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        try:
            while running:
                # With vsync the swap already paces frames; FPS is a safety cap
                self.clock.tick(FPS)
                running = self.handle_events()
                if not running:
                    break
                self.render()
        finally:
            self.scene.release()
            pygame.quit()
