import math

import numpy as np
import pytest

from collision import Circle, Segment
from simulation.sensors import DistanceSensor, SensorArray

POST = Segment((50, -10), (50, 10))


def test_sensor_reads_nearest_hit():
    sensor = DistanceSensor(0.0, max_range=100)
    assert sensor.get_distance(0, 0, 0.0, [POST]) == pytest.approx(0.5)
    assert sensor.last_hit.x == pytest.approx(50)
    assert sensor.last_hit.y == pytest.approx(0)


def test_sensor_picks_closest_of_several():
    sensor = DistanceSensor(0.0, max_range=100)
    obstacles = [POST, Circle((40, 0), 10)]
    assert sensor.get_distance(0, 0, 0.0, obstacles) == pytest.approx(0.3)


def test_sensor_with_nothing_in_range():
    sensor = DistanceSensor(0.0, max_range=100)
    assert sensor.get_distance(0, 0, 0.0, []) == 1.0
    assert sensor.last_hit is None
    assert sensor.get_distance(0, 0, 0.0, [Segment((150, -10), (150, 10))]) == 1.0


def test_sensor_respects_heading():
    sensor = DistanceSensor(0.0, max_range=100)
    # facing away from the post
    assert sensor.get_distance(0, 0, math.pi, [POST]) == 1.0


def test_start_offset_is_rotated_with_heading():
    sensor = DistanceSensor(0.0, max_range=100, start_offset=(10, 0))
    x, y = sensor.get_origin(0, 0, math.pi / 2)
    assert x == pytest.approx(0)
    assert y == pytest.approx(10)


def test_ray_endpoints_follow_reading():
    sensor = DistanceSensor(0.0, max_range=100)
    start, end = sensor.get_ray_endpoints(0, 0, 0.0, 0.5)
    assert start == pytest.approx((0, 0))
    assert end == pytest.approx((50, 0))


def test_sensor_array_readings():
    array = SensorArray()
    readings = array.get_readings(0, 0, 0.0, [POST])
    assert isinstance(readings, np.ndarray)
    assert readings.dtype == np.float32
    assert readings.shape == (3,)
    assert readings[0] == pytest.approx(0.5 * 100 / 300)
    assert readings[1] == pytest.approx(1.0)
    assert array.get_hits()[1] is None


def test_sensor_array_layout():
    array = SensorArray([{'angle': 90, 'range': 20}])
    assert len(array.sensors) == 1
    assert array.sensors[0].angle_offset == pytest.approx(math.pi / 2)
    assert array.sensors[0].max_range == 20
    rays = array.get_sensor_rays(0, 0, 0.0, [1.0])
    assert rays[0][1] == pytest.approx((0, 20))
