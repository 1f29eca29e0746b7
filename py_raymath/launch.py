"""Projectile launch demo: a point mass under constant gravity and wind.

Each tick moves the projectile by its velocity and then changes the velocity by
gravity plus wind. ``simulate`` repeats this while the projectile is above the
ground (y > 0) and plots every position on a Canvas, flipping y so that the
ground is the bottom row.

Typical Usage:
    ```python
    from py_raymath.launch import LaunchConfig, run

    canvas, path = run(LaunchConfig(width=300, height=200, speed=6.0))
    canvas.to_disk("projectile.ppm")
    ```
"""
from __future__ import annotations

from dataclasses import dataclass, fields

from typing_extensions import Any, Dict, List, NamedTuple, Optional, Tuple, TypedDict

from py_raymath.canvas import Canvas
from py_raymath.color import Color
from py_raymath.logger import logger
from py_raymath.vector import Point, Vector

__all__ = (
    'Projectile',
    'Environment',
    'LaunchConfig',
    'LaunchConfigDict',
    'DEFAULT_MAX_TICKS',
    'create_launch_config',
    'tick',
    'simulate',
    'run',
)

DEFAULT_MAX_TICKS: int = 100_000

Triple = Tuple[float, float, float]


class Projectile(NamedTuple):
    position: Point
    velocity: Vector


class Environment(NamedTuple):
    gravity: Vector
    wind: Vector


def tick(env: Environment, proj: Projectile) -> Projectile:
    """Advance the projectile by one time step."""
    position = proj.position + proj.velocity
    velocity = proj.velocity + env.gravity + env.wind
    return Projectile(position, velocity)


def simulate(env: Environment,
             proj: Projectile,
             canvas: Optional[Canvas] = None,
             color: Color = Color(0.0, 0.0, 0.0),
             max_ticks: int = DEFAULT_MAX_TICKS) -> List[Point]:
    """Tick until the projectile reaches the ground, plotting every position.

    Positions map to the pixel ``(int(x), int(canvas.height - y))``, truncated
    toward zero; pixels outside the canvas are dropped by Canvas.set_pixel.

    Args:
        env: Gravity and wind.
        proj: Initial state.
        canvas: Optional canvas to draw the trajectory on.
        color: Trajectory color.
        max_ticks: Upper bound on steps, for environments that never bring the
            projectile down.

    Returns:
        The positions after each tick, the landing position last.
    """
    logger.debug(f"Simulating projectile from {proj.position!r} with velocity {proj.velocity!r}")
    path: List[Point] = []
    ticks = 0
    while proj.position.y > 0:
        if ticks >= max_ticks:
            logger.warning(f"Projectile still airborne after {max_ticks} ticks, simulation stopped")
            break
        proj = tick(env, proj)
        ticks += 1
        path.append(proj.position)
        if canvas is not None:
            canvas.set_pixel(proj.position.x, canvas.height - proj.position.y, color)
    logger.debug(f"Projectile landed after {ticks} ticks at {proj.position!r}")
    return path


@dataclass
class LaunchConfig:
    """Parameters of the launch demo.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        start: Launch position.
        velocity: Launch direction, normalized before use.
        speed: Launch speed, applied to the normalized direction.
        gravity: Per-tick velocity change from gravity.
        wind: Per-tick velocity change from wind.
        background: Canvas background color.
        trail: Trajectory color.
        output: Path of the PPM file written by the command line tool.
        max_ticks: Simulation step limit.
    """
    width: int = 900
    height: int = 550
    start: Triple = (0.0, 1.0, 0.0)
    velocity: Triple = (1.0, 1.8, 0.0)
    speed: float = 11.25
    gravity: Triple = (0.0, -0.1, 0.0)
    wind: Triple = (-0.01, 0.0, 0.0)
    background: Triple = (1.0, 1.0, 1.0)
    trail: Triple = (0.0, 0.0, 0.0)
    output: str = "projectile.ppm"
    max_ticks: int = DEFAULT_MAX_TICKS

    def projectile(self) -> Projectile:
        return Projectile(Point(*self.start), Vector(*self.velocity).normalize() * self.speed)

    def environment(self) -> Environment:
        return Environment(Vector(*self.gravity), Vector(*self.wind))


class LaunchConfigDict(TypedDict, total=False):
    """Partial LaunchConfig, as read from the ``[pyrm.launch]`` table."""
    width: int
    height: int
    start: Triple
    velocity: Triple
    speed: float
    gravity: Triple
    wind: Triple
    background: Triple
    trail: Triple
    output: str
    max_ticks: int


_TRIPLE_FIELDS = ('start', 'velocity', 'gravity', 'wind', 'background', 'trail')


def create_launch_config(launch_config: Optional[Dict[str, Any]] = None) -> LaunchConfig:
    """Create LaunchConfig from an optional dictionary of overrides.

    Unknown keys are ignored with a warning; list values (as TOML produces) are
    converted to tuples.

    Raises:
        TypeError: If ``launch_config`` is not a dictionary.
        ValueError: If a vector or color entry does not have three components.
    """
    config = LaunchConfig()
    if launch_config is None:
        return config
    if not isinstance(launch_config, dict):
        raise TypeError(f"launch config has to be a dict, got {type(launch_config).__name__}")

    known = {f.name for f in fields(LaunchConfig)}
    for key, value in launch_config.items():
        if key not in known:
            logger.warning(f"Unknown launch config key `{key}` ignored")
            continue
        if key in _TRIPLE_FIELDS:
            value = tuple(float(v) for v in value)
            if len(value) != 3:
                raise ValueError(f"`{key}` has to have 3 components, got {len(value)}")
        setattr(config, key, value)
    return config


def run(config: LaunchConfig) -> Tuple[Canvas, List[Point]]:
    """Build the canvas, launch the projectile and draw its trajectory."""
    canvas = Canvas(config.width, config.height, Color(*config.background))
    path = simulate(config.environment(), config.projectile(), canvas,
                    Color(*config.trail), config.max_ticks)
    return canvas, path
