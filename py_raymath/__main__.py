"""Command line entry point: render the projectile launch demo to a PPM file."""
import argparse
import logging
import sys

from typing_extensions import List, Optional

from py_raymath import __version__, basicConfig
from py_raymath.launch import create_launch_config, run
from py_raymath.logger import logger


def add_canvas_arguments(parser):
    canvas = parser.add_argument_group('Canvas', 'Output image parameters')
    canvas.add_argument("-W", "--width", action="store", type=int, help="Canvas width in pixels")
    canvas.add_argument("-H", "--height", action="store", type=int, help="Canvas height in pixels")
    canvas.add_argument("-o", "--output", action="store", help="Output .ppm file")


def add_launch_arguments(parser):
    launch = parser.add_argument_group('Launch', 'Projectile parameters')
    launch.add_argument("-s", "--speed", action="store", type=float, help="Launch speed")
    launch.add_argument("-t", "--max-ticks", action="store", type=int, help="Simulation step limit")


def get_arg_parser():
    parser = argparse.ArgumentParser(
        prog=f'pyrm v{__version__}',
        description="Trace a projectile under gravity and wind and save it as a PPM image"
    )
    parser.add_argument("-c", "--config", action="store",
                        help="Path to a .pyrm.toml file (default: search from the current directory)")
    parser.add_argument("-v", "--version", action='version',
                        version=f'pyrm v{__version__}', help="Show version")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug messages")

    add_canvas_arguments(parser)
    add_launch_arguments(parser)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = get_arg_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logger.setLevel(logging.DEBUG)
        logger.info("Debug messages enabled")

    try:
        pyrm = basicConfig(args.config)
        config = create_launch_config(pyrm.get('launch'))
        for key in ('width', 'height', 'output', 'speed', 'max_ticks'):
            if (value := getattr(args, key)) is not None:
                setattr(config, key, value)

        canvas, path = run(config)
        canvas.to_disk(config.output)
        logger.info(f"Wrote {config.width}x{config.height} image with {len(path)} "
                    f"trajectory points to {config.output}")
    except (OSError, ValueError, TypeError) as exc:
        logger.exception(exc)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
