"""
Scene environment - a movable probe shape queried against a static scene
every step, with optional pygame rendering.
"""

import logging
import math
from dataclasses import dataclass
from typing import List

import numpy as np
import pygame
from pygame.math import Vector2

from collision import AxisAlignedRect, Circle, Line, Polygon, Ray, Segment, intersect
from simulation.scene import SceneBundle, shape_anchor, translate_shape
from simulation.sensors import SensorArray

logger = logging.getLogger(__name__)

SHAPE_COLOR = (200, 200, 200)
PROBE_COLOR = (255, 80, 80)
HIT_COLOR = (255, 255, 0)
SENSOR_COLORS = [(0, 255, 0), (255, 255, 0), (0, 255, 255)]


@dataclass
class ProbeHit:
    """Intersection points between the probe and one named scene shape."""
    name: str
    points: List[Vector2]


class Environment:
    def __init__(self, scene: SceneBundle, show_sensors=True, show_hits=True, headless=False):
        """
        Initialize the scene environment.

        Args:
            scene: Loaded scene bundle
            show_sensors: Whether to draw sensor rays
            show_hits: Whether to draw intersection markers
            headless: If True, skip pygame window creation
        """
        self.scene = scene
        self.window_size = scene.window_size
        self.show_sensors = show_sensors
        self.show_hits = show_hits
        self.headless = headless

        if not headless:
            pygame.init()
            self.screen = pygame.display.set_mode(self.window_size)
            pygame.display.set_caption("Collision Shapes 2D")
            self.debug_font = pygame.font.Font(None, 24)
        else:
            self.screen = None
            self.debug_font = None

        # probe defaults to a small circle if the scene doesn't define one
        self.base_probe = scene.probe if scene.probe is not None else Circle((0, 0), 40)
        self.sensors = SensorArray(scene.sensors)
        self.heading = 0.0
        self.probe = self.base_probe

        # Cache so repeated step()/render() calls for one pose don't re-query
        self._hit_cache = {
            'pose': None,
            'hits': None,
            'readings': None,
        }

        self.reset()

    def reset(self):
        """Move the probe to the window center and clear the heading."""
        self.heading = 0.0
        self.move_probe(self.window_size[0] / 2, self.window_size[1] / 2)
        return self.get_observation()

    def move_probe(self, x, y):
        """Place the probe so its anchor point sits at (x, y)."""
        offset = Vector2(x, y) - shape_anchor(self.base_probe)
        self.probe = translate_shape(self.base_probe, offset)

    def rotate_probe(self, delta):
        """Rotate the sensor heading by delta radians."""
        self.heading = math.atan2(math.sin(self.heading + delta), math.cos(self.heading + delta))

    def get_probe_position(self):
        anchor = shape_anchor(self.probe)
        return anchor.x, anchor.y

    def _current_pose(self):
        x, y = self.get_probe_position()
        return (x, y, self.heading)

    def _refresh(self):
        pose = self._current_pose()
        if self._hit_cache['pose'] == pose and self._hit_cache['hits'] is not None:
            return

        hits = []
        for name, shape in self.scene.shapes:
            points = intersect(self.probe, shape)
            if points:
                hits.append(ProbeHit(name, points))

        x, y, heading = pose
        readings = self.sensors.get_readings(x, y, heading, (shape for _, shape in self.scene.shapes))

        self._hit_cache['pose'] = pose
        self._hit_cache['hits'] = hits
        self._hit_cache['readings'] = readings

    def get_hits(self) -> List[ProbeHit]:
        self._refresh()
        return self._hit_cache['hits']

    def get_observation(self):
        """Current sensor readings."""
        self._refresh()
        return self._hit_cache['readings']

    def step(self):
        """
        Query the probe against the scene.

        Returns:
            observation: Sensor readings (float32 array)
            info: Hit summary for this step
        """
        observation = self.get_observation()
        hits = self.get_hits()
        x, y = self.get_probe_position()

        info = {
            'hits': {hit.name: len(hit.points) for hit in hits},
            'total_points': sum(len(hit.points) for hit in hits),
            'inside': self.scene.containing((x, y)),
            'position': (x, y),
            'heading': self.heading,
        }
        if hits:
            logger.debug("Probe at (%.1f, %.1f) hits %s", x, y, info['hits'])
        return observation, info

    def _draw_shape(self, shape, color, width=2):
        if isinstance(shape, (Line, Ray)):
            start, through = (shape.p1, shape.p2) if isinstance(shape, Line) else (shape.pos, shape.dir)
            direction = through - start
            if direction.length() == 0:
                return
            # long enough to leave the window in both directions
            reach = direction.normalize() * sum(self.window_size)
            begin = start - reach if isinstance(shape, Line) else start
            pygame.draw.line(self.screen, color, begin, start + reach, width)
        elif isinstance(shape, Segment):
            pygame.draw.line(self.screen, color, shape.p1, shape.p2, width)
        elif isinstance(shape, Circle):
            pygame.draw.circle(self.screen, color, shape.pos, max(1, int(shape.radius)), width)
        elif isinstance(shape, Polygon):
            if len(shape.points) >= 3:
                pygame.draw.polygon(self.screen, color, shape.points, width)
        elif isinstance(shape, AxisAlignedRect):
            pygame.draw.rect(self.screen, color,
                             pygame.Rect(shape.pos.x, shape.pos.y, shape.size.x, shape.size.y), width)

    def render(self, fps=None):
        """Render the scene."""
        if self.headless or self.screen is None:
            return  # Skip rendering in headless mode

        self.screen.fill((30, 30, 30))

        for _, shape in self.scene.shapes:
            self._draw_shape(shape, SHAPE_COLOR)
        self._draw_shape(self.probe, PROBE_COLOR)

        if self.show_hits:
            for hit in self.get_hits():
                for point in hit.points:
                    pygame.draw.circle(self.screen, HIT_COLOR, (int(point.x), int(point.y)), 4)

        if self.show_sensors:
            x, y = self.get_probe_position()
            readings = self.get_observation()
            rays = self.sensors.get_sensor_rays(x, y, self.heading, readings)
            for i, (start, end) in enumerate(rays):
                color = SENSOR_COLORS[i % len(SENSOR_COLORS)]
                pygame.draw.line(self.screen, color,
                                 (int(start[0]), int(start[1])),
                                 (int(end[0]), int(end[1])), 2)

        self.draw_debug_info(fps)

    def draw_debug_info(self, fps=None):
        """Draw debug information on screen."""
        if self.headless or self.screen is None or self.debug_font is None:
            return

        x, y = self.get_probe_position()
        hits = self.get_hits()
        readings = self.get_observation()
        info_lines = [
            f"FPS: {fps:.1f}" if fps else "FPS: --",
            f"Probe: {type(self.probe).__name__} at ({x:.1f}, {y:.1f})",
            f"Heading: {math.degrees(self.heading):.1f}°",
            f"Sensors: {[f'{r:.2f}' for r in np.asarray(readings)]}",
            f"Hits: {sum(len(h.points) for h in hits)}",
        ]
        for hit in hits:
            info_lines.append(f"  {hit.name}: {len(hit.points)}")

        for i, line in enumerate(info_lines):
            text = self.debug_font.render(line, True, (255, 255, 255))
            self.screen.blit(text, (10, 10 + i * 25))

    def close(self):
        if not self.headless:
            pygame.quit()
