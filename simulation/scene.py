"""
Scene loading - builds collision shapes from YAML scene files.

A scene file looks like:

    window_size: [1024, 768]
    fps: 60
    shapes:
      - {name: wall, type: segment, p1: [100, 100], p2: [900, 120]}
      - {name: ball, type: circle, pos: [400, 400], radius: 80}
    probe: {type: circle, pos: [0, 0], radius: 40}
    sensors:
      - {angle: 0, range: 300}
"""

import logging
from dataclasses import dataclass, field
from itertools import combinations
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from collision import (
    AxisAlignedRect, Circle, Line, Polygon, Ray, Segment,
    intersect, point_in_circle, point_in_rect,
)

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = (1024, 768)
DEFAULT_FPS = 60
DEFAULT_SENSORS = [
    {'angle': 0.0, 'range': 300.0},
    {'angle': 45.0, 'range': 300.0},
    {'angle': -45.0, 'range': 300.0},
]

# type name -> (class, required fields in constructor order)
SHAPE_FIELDS = {
    'line': (Line, ('p1', 'p2')),
    'segment': (Segment, ('p1', 'p2')),
    'ray': (Ray, ('pos', 'dir')),
    'circle': (Circle, ('pos', 'radius')),
    'polygon': (Polygon, ('points',)),
    'rect': (AxisAlignedRect, ('pos', 'size')),
}
TYPE_NAMES = {cls: name for name, (cls, _) in SHAPE_FIELDS.items()}


def load_config(config_path):
    """Load a scene configuration from a YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Scene file '{config_path}' not found.")
    with open(path, 'r') as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Scene file '{config_path}' is not valid YAML: {e}") from e
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Scene file '{config_path}' must contain a mapping, got {type(config).__name__}")
    return config


def shape_from_config(entry):
    """
    Build one shape from its scene description.

    Args:
        entry: Mapping with a 'type' key and the fields for that shape type

    Returns:
        The shape instance

    Raises:
        ValueError: if the type is unknown or a field is missing/malformed
    """
    if not isinstance(entry, dict):
        raise ValueError(f"Shape entry must be a mapping, got {entry!r}")

    shape_type = entry.get('type')
    if shape_type not in SHAPE_FIELDS:
        raise ValueError(f"Unknown shape type: {shape_type!r} in {entry!r}")

    cls, fields = SHAPE_FIELDS[shape_type]
    missing = [name for name in fields if name not in entry]
    if missing:
        raise ValueError(f"Shape {entry!r} is missing field(s): {', '.join(missing)}")

    try:
        return cls(*(entry[name] for name in fields))
    except (TypeError, IndexError) as e:
        raise ValueError(f"Malformed {shape_type} entry {entry!r}: {e}") from e


def _pair(v):
    return [float(v.x), float(v.y)]


def shape_to_config(shape, name=None):
    """Inverse of shape_from_config, suitable for yaml.dump."""
    shape_type = TYPE_NAMES.get(type(shape))
    if shape_type is None:
        raise ValueError(f"Not a collision shape: {shape!r}")

    entry = {'type': shape_type}
    if name is not None:
        entry['name'] = name
    for field_name in SHAPE_FIELDS[shape_type][1]:
        value = getattr(shape, field_name)
        if field_name == 'points':
            entry[field_name] = [_pair(p) for p in value]
        elif field_name == 'radius':
            entry[field_name] = float(value)
        else:
            entry[field_name] = _pair(value)
    return entry


def translate_shape(shape, offset):
    """Return a copy of shape moved by offset."""
    if isinstance(shape, (Line, Segment)):
        return type(shape)(shape.p1 + offset, shape.p2 + offset)
    if isinstance(shape, Ray):
        return Ray(shape.pos + offset, shape.dir + offset)
    if isinstance(shape, Circle):
        return Circle(shape.pos + offset, shape.radius)
    if isinstance(shape, Polygon):
        return Polygon([p + offset for p in shape.points])
    if isinstance(shape, AxisAlignedRect):
        return AxisAlignedRect(shape.pos + offset, shape.size)
    raise ValueError(f"Not a collision shape: {shape!r}")


def shape_anchor(shape):
    """Reference point used to place a shape (e.g. under the mouse)."""
    if isinstance(shape, (Line, Segment)):
        return shape.p1
    if isinstance(shape, Polygon):
        return shape.points[0]
    return shape.pos


@dataclass
class SceneBundle:
    """Container for all scene-specific data."""
    shapes: List[Tuple[str, object]]
    probe: Optional[object] = None
    sensors: List[dict] = field(default_factory=lambda: list(DEFAULT_SENSORS))
    window_size: Tuple[int, int] = DEFAULT_WINDOW_SIZE
    fps: int = DEFAULT_FPS
    source_path: Optional[str] = None

    def pairwise_intersections(self):
        """
        Intersect every unordered pair of scene shapes.

        Returns:
            List of (name_a, name_b, points) for pairs with at least one point
        """
        hits = []
        for (name_a, a), (name_b, b) in combinations(self.shapes, 2):
            points = intersect(a, b)
            if points:
                hits.append((name_a, name_b, points))
        return hits

    def containing(self, point):
        """Names of the circles and rectangles that strictly contain point."""
        names = []
        for name, shape in self.shapes:
            if isinstance(shape, Circle) and point_in_circle(point, shape):
                names.append(name)
            elif isinstance(shape, AxisAlignedRect) and point_in_rect(point, shape):
                names.append(name)
        return names

    def to_config(self):
        config = {
            'window_size': list(self.window_size),
            'fps': self.fps,
            'shapes': [shape_to_config(shape, name) for name, shape in self.shapes],
            'sensors': [dict(s) for s in self.sensors],
        }
        if self.probe is not None:
            config['probe'] = shape_to_config(self.probe)
        return config


def scene_from_config(config, source_path=None):
    """Build a SceneBundle from an already-parsed scene mapping."""
    if not isinstance(config, dict):
        raise ValueError(f"Scene must be a mapping, got {type(config).__name__}")
    for key in ('shapes', 'sensors'):
        if config.get(key) is not None and not isinstance(config[key], list):
            raise ValueError(f"'{key}' must be a list, got {config[key]!r}")

    shapes = []
    for i, entry in enumerate(config.get('shapes') or []):
        shape = shape_from_config(entry)
        name = entry.get('name') or f"{entry['type']}{i}"
        shapes.append((name, shape))
        logger.debug("Loaded %s '%s': %r", entry['type'], name, shape)

    probe = None
    if config.get('probe') is not None:
        probe = shape_from_config(config['probe'])

    sensors = []
    for s in config.get('sensors', DEFAULT_SENSORS) or []:
        if not isinstance(s, dict):
            raise ValueError(f"Sensor entry must be a mapping, got {s!r}")
        if 'angle' not in s:
            raise ValueError(f"Sensor entry {s!r} is missing 'angle'")
        sensors.append({'angle': float(s['angle']), 'range': float(s.get('range', 300.0))})

    window_size = tuple(int(v) for v in config.get('window_size', DEFAULT_WINDOW_SIZE))
    if len(window_size) != 2 or min(window_size) <= 0:
        raise ValueError(f"window_size must be two positive integers, got {config.get('window_size')!r}")

    return SceneBundle(
        shapes=shapes,
        probe=probe,
        sensors=sensors,
        window_size=window_size,
        fps=int(config.get('fps', DEFAULT_FPS)),
        source_path=source_path,
    )


def load_scene(config_path):
    """Load a SceneBundle from a YAML scene file."""
    scene = scene_from_config(load_config(config_path), source_path=str(config_path))
    logger.info("Loaded scene %s with %d shape(s)", config_path, len(scene.shapes))
    return scene


def save_scene(scene, config_path):
    """Write the resolved scene back to YAML."""
    with open(config_path, 'w') as f:
        yaml.dump(scene.to_config(), f, default_flow_style=False)
