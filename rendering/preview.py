"""Pygame preview window for the block simulation.

Draws each FrameOutput with a painter's algorithm: triangles are
projected by the Camera, sorted far-to-near and filled with a flat
shaded color. Good enough to watch small automata evolve; not a real
renderer.

Controls:
    arrows   orbit the camera
    +/-      zoom
    space    pause / resume
    esc      quit
"""

import logging
from typing import List, Optional, Tuple

import pygame

from blocksim.color import to_rgb255
from blocksim.config.display import BACKGROUND_COLOR, CAMERA_ORBIT_SPEED
from blocksim.simulation.engine import FrameOutput, SimulationEngine
from rendering.camera import Camera
from rendering.shading import shade_face

logger = logging.getLogger(__name__)

Polygon = Tuple[float, Tuple[int, int, int], List[Tuple[float, float]]]


class PreviewRenderer:
    """Renders frames onto a pygame surface.

    Attributes:
        screen: Pygame surface to render to
        camera: Camera used for projection
        font: Font for the HUD (None disables it)
    """

    def __init__(
        self,
        screen: pygame.Surface,
        camera: Camera,
        font: Optional[pygame.font.Font] = None,
    ) -> None:
        self.screen = screen
        self.camera = camera
        self.font = font

    def build_polygons(self, frame: FrameOutput) -> List[Polygon]:
        """Project and shade every triangle, sorted far to near."""
        vertices = frame.vertices
        indices = frame.indices
        lights = frame.lights.active(frame.light_count)

        polygons: List[Polygon] = []
        for i in range(0, frame.index_count - 2, 3):
            v0, v1, v2 = vertices[indices[i]], vertices[indices[i + 1]], vertices[indices[i + 2]]
            projected = [self.camera.project(v.position) for v in (v0, v1, v2)]
            if any(p is None for p in projected):
                continue

            centroid = tuple(
                (v0.position[axis] + v1.position[axis] + v2.position[axis]) / 3 for axis in range(3)
            )
            color = shade_face(v0.color, v0.normal, centroid, lights)
            depth = sum(p[2] for p in projected) / 3
            points = [(p[0], p[1]) for p in projected]
            polygons.append((depth, to_rgb255(color), points))

        polygons.sort(key=lambda polygon: polygon[0], reverse=True)
        return polygons

    def draw(self, frame: FrameOutput, stats: Optional[dict] = None) -> int:
        """Draw one frame; returns the number of triangles drawn."""
        self.screen.fill(BACKGROUND_COLOR)
        polygons = self.build_polygons(frame)
        for _, color, points in polygons:
            pygame.draw.polygon(self.screen, color, points)

        if self.font is not None and stats is not None:
            self._draw_hud(stats)
        return len(polygons)

    def _draw_hud(self, stats: dict) -> None:
        lines = [
            f"tick {stats['tick']}",
            f"cells {stats['live_cells']}  entities {stats['entities']}",
            f"lights {stats['lights']}",
        ]
        y = 8
        for line in lines:
            surface = self.font.render(line, True, (230, 230, 230))
            self.screen.blit(surface, (8, y))
            y += surface.get_height() + 2


def run_preview(engine: SimulationEngine) -> None:
    """Open a window and run the engine until the user quits."""
    display = engine.config.display
    pygame.init()
    try:
        screen = pygame.display.set_mode((display.screen_width, display.screen_height))
    except pygame.error as e:
        logger.error("Couldn't set the display mode: %s", e)
        pygame.quit()
        raise

    pygame.display.set_caption("Block World Simulation")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 22)

    size = engine.automata.size.as_tuple() if engine.automata is not None else (16, 16, 16)
    camera = Camera.framing_grid(size, display.screen_width, display.screen_height)
    renderer = PreviewRenderer(screen, camera, font)

    engine.setup()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    engine.paused = not engine.paused
                    logger.info("Simulation %s", "paused" if engine.paused else "resumed")

        keys = pygame.key.get_pressed()
        d_yaw = (keys[pygame.K_RIGHT] - keys[pygame.K_LEFT]) * CAMERA_ORBIT_SPEED
        d_pitch = (keys[pygame.K_UP] - keys[pygame.K_DOWN]) * CAMERA_ORBIT_SPEED
        if d_yaw or d_pitch:
            camera.orbit(d_yaw, d_pitch)
        if keys[pygame.K_EQUALS] or keys[pygame.K_KP_PLUS]:
            camera.zoom(0.98)
        if keys[pygame.K_MINUS] or keys[pygame.K_KP_MINUS]:
            camera.zoom(1.02)

        frame = engine.update()
        if frame is not None:
            renderer.draw(frame, engine.get_stats())
        pygame.display.flip()
        clock.tick(display.frame_rate)

    pygame.quit()
