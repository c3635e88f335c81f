"""
Ray distance sensors - cast collision rays against scene shapes.
"""

import math
import numpy as np
from collision import Ray, intersect
from utils.geometry import distance


class DistanceSensor:
    def __init__(self, angle_offset, max_range=300, start_offset=(0, 0)):
        """
        Initialize a distance sensor.

        Args:
            angle_offset: Sensor angle relative to the carrier heading (radians)
            max_range: Maximum detection range in pixels
            start_offset: (forward, sideways) offset from the carrier origin in its local frame
        """
        self.angle_offset = angle_offset
        self.max_range = max_range
        self.start_offset = start_offset
        self.last_hit = None

    def get_origin(self, x, y, heading):
        """Sensor start position in world coordinates."""
        cos_h = math.cos(heading)
        sin_h = math.sin(heading)

        # Transform start_offset from local coordinates to world coordinates
        offset_x = self.start_offset[0] * cos_h - self.start_offset[1] * sin_h
        offset_y = self.start_offset[0] * sin_h + self.start_offset[1] * cos_h

        return (x + offset_x, y + offset_y)

    def get_ray(self, x, y, heading):
        """Ray from the sensor origin through the point at max_range."""
        start_x, start_y = self.get_origin(x, y, heading)
        sensor_angle = heading + self.angle_offset
        through = (
            start_x + self.max_range * math.cos(sensor_angle),
            start_y + self.max_range * math.sin(sensor_angle),
        )
        return Ray((start_x, start_y), through)

    def get_distance(self, x, y, heading, obstacles):
        """
        Get distance reading from this sensor.

        Args:
            x, y: Carrier position
            heading: Carrier heading in radians
            obstacles: Iterable of collision shapes

        Returns:
            Normalized distance (1.0 = nothing in range, 0.0 = touching obstacle)
        """
        ray = self.get_ray(x, y, heading)

        # Find closest intersection with any obstacle
        min_distance = self.max_range
        closest_hit = None

        for shape in obstacles:
            for point in intersect(ray, shape):
                hit_distance = distance(ray.pos, point)
                if hit_distance < min_distance:
                    min_distance = hit_distance
                    closest_hit = point

        # Store hit point for visualization
        self.last_hit = closest_hit

        return min_distance / self.max_range

    def get_ray_endpoints(self, x, y, heading, distance_reading):
        """
        Get the endpoints of the sensor ray for visualization.

        Returns:
            Tuple of ((start_x, start_y), (end_x, end_y))
        """
        start_x, start_y = self.get_origin(x, y, heading)
        sensor_angle = heading + self.angle_offset
        actual_range = distance_reading * self.max_range

        end_pos = (
            start_x + actual_range * math.cos(sensor_angle),
            start_y + actual_range * math.sin(sensor_angle)
        )
        return (start_x, start_y), end_pos


class SensorArray:
    def __init__(self, layout=None):
        """
        Initialize the sensor array.

        Args:
            layout: List of {'angle': degrees, 'range': pixels} dicts; defaults
                to a forward sensor and two sensors at +/-45 degrees
        """
        if layout is None:
            layout = [{'angle': 0.0}, {'angle': 45.0}, {'angle': -45.0}]

        self.sensors = [
            DistanceSensor(math.radians(s['angle']), max_range=s.get('range', 300.0))
            for s in layout
        ]

    def get_readings(self, x, y, heading, obstacles):
        """
        Get readings from all sensors.

        Returns:
            float32 array of normalized distance readings, one per sensor
        """
        obstacles = list(obstacles)
        readings = [sensor.get_distance(x, y, heading, obstacles) for sensor in self.sensors]
        return np.array(readings, dtype=np.float32)

    def get_hits(self):
        """Closest hit point of each sensor from the last reading (None if clear)."""
        return [sensor.last_hit for sensor in self.sensors]

    def get_sensor_rays(self, x, y, heading, readings):
        """
        Get sensor ray endpoints for visualization.

        Returns:
            List of tuples: [((start_x, start_y), (end_x, end_y)), ...]
        """
        rays = []
        for sensor, reading in zip(self.sensors, readings):
            rays.append(sensor.get_ray_endpoints(x, y, heading, reading))
        return rays
