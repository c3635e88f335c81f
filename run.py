"""
Collision scene runner.
Load a YAML scene and query shape intersections interactively or headless.

Usage:
    python run.py --scene scenes/demo.yaml
    python run.py --scene scenes/demo.yaml --no-render
    python run.py --scene scenes/demo.yaml --no-render --dump resolved.yaml
"""

import argparse
import logging
import math
import sys

import pygame

from simulation.environment import Environment
from simulation.scene import load_scene, save_scene

ROTATE_STEP = math.radians(5)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Collision scene runner")

    parser.add_argument("--scene", "-s", type=str, default="scenes/demo.yaml",
                        help="Path to the YAML scene file")
    parser.add_argument("--no-render", action="store_true",
                        help="Print intersections and exit without opening a window")
    parser.add_argument("--fps", type=int, default=None,
                        help="Frame rate (defaults to the scene's fps)")
    parser.add_argument("--dump", type=str, default=None,
                        help="Write the resolved scene to this YAML path")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")

    return parser.parse_args(argv)


def format_point(p):
    return f"({p.x:.2f}, {p.y:.2f})"


def report(env):
    """Print every scene intersection plus the probe hits at its start pose."""
    scene = env.scene
    pairs = scene.pairwise_intersections()
    print(f"Scene pairs with intersections: {len(pairs)}")
    for name_a, name_b, points in pairs:
        print(f"  {name_a} x {name_b}: {', '.join(format_point(p) for p in points)}")

    observation, info = env.step()
    x, y = info['position']
    print(f"Probe at ({x:.1f}, {y:.1f}) -> {info['total_points']} point(s)")
    for name, count in info['hits'].items():
        print(f"  {name}: {count}")
    if info['inside']:
        print(f"  inside: {', '.join(info['inside'])}")
    print(f"Sensors: {[f'{r:.2f}' for r in observation]}")


def main(argv=None):
    """Main loop: mouse moves the probe, keys toggle overlays."""
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    render_enabled = not args.no_render

    try:
        scene = load_scene(args.scene)
    except (FileNotFoundError, ValueError) as e:
        print(f"✗ Error loading scene: {e}")
        return 1

    fps_target = args.fps or scene.fps

    print("Collision Shapes 2D")
    print(f"Scene: {args.scene}")
    print(f"Shapes: {len(scene.shapes)}")
    print(f"Rendering: {'ON' if render_enabled else 'OFF'}")
    print("-" * 40)

    if args.dump:
        save_scene(scene, args.dump)
        print(f"✓ Resolved scene written to: {args.dump}")

    env = Environment(scene, headless=not render_enabled)

    if not render_enabled:
        report(env)
        return 0

    print("\nControls:")
    print("Mouse - Move probe")
    print("Q/E - Rotate sensors")
    print("S - Toggle sensors")
    print("H - Toggle hit markers")
    print("R - Reset probe")
    print("ESC - Exit")
    print()

    clock = pygame.time.Clock()
    running = True

    while running:
        clock.tick(fps_target)
        fps = clock.get_fps()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEMOTION:
                env.move_probe(*event.pos)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    env.reset()
                elif event.key == pygame.K_s:
                    env.show_sensors = not env.show_sensors
                    print(f"Sensors: {'ON' if env.show_sensors else 'OFF'}")
                elif event.key == pygame.K_h:
                    env.show_hits = not env.show_hits
                    print(f"Hit markers: {'ON' if env.show_hits else 'OFF'}")

        keys = pygame.key.get_pressed()
        if keys[pygame.K_q]:
            env.rotate_probe(-ROTATE_STEP)
        if keys[pygame.K_e]:
            env.rotate_probe(ROTATE_STEP)

        env.step()
        env.render(fps)
        pygame.display.flip()

    env.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
