"""Data and equations of motion for a simple two-dimensional bouncing ball."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

DTR = 0.0174532925199433
"""Degrees to radians."""


def _pair() -> list[float]:
    return [0.0, 0.0]


@dataclass
class BallEnviron:
    """Central constant force field acting on the ball."""

    origin: list[float] = field(default_factory=_pair)
    """Origin of the force centre (m)."""
    force: float = 0.0
    """Force magnitude (N)."""


@dataclass
class BallEnvironState:
    """Force the environment currently applies to the ball."""

    force: list[float] = field(default_factory=_pair)
    """Total environment force on the ball (N)."""


@dataclass
class BallExec:
    """Executive control data for the ball."""

    print_off: bool = False
    """Suppress position output when true."""
    force: list[float] = field(default_factory=_pair)
    """Total external force on the ball (N)."""
    collected_forces: list[list[float]] = field(default_factory=list)
    """External force vectors summed into ``force``; entries may be shared lists."""


@dataclass
class BallStateInit:
    """Initial conditions of the ball."""

    mass: float = 0.0
    """Total mass (kg)."""
    location: list[float] = field(default_factory=_pair)
    """Horizontal and vertical position (m)."""
    speed: float = 0.0
    """Linear speed (m/s)."""
    elevation: float = 0.0
    """Trajectory angle above the horizontal (rad)."""


@dataclass
class BallState:
    """Equations-of-motion state of the ball."""

    mass: float = 0.0
    """Total mass (kg)."""
    position: list[float] = field(default_factory=_pair)
    """Horizontal and vertical position (m)."""
    velocity: list[float] = field(default_factory=_pair)
    """Horizontal and vertical velocity (m/s)."""
    acceleration: list[float] = field(default_factory=_pair)
    """Horizontal and vertical acceleration (m/s2)."""


def environ_default_data() -> BallEnviron:
    """Return the default force field: 8 N towards the point (0, 2)."""
    return BallEnviron(origin=[0.0, 2.0], force=8.0)


def force_field(env: BallEnviron, pos: list[float]) -> BallEnvironState:
    """Return the force the field applies to a ball at ``pos``.

    The force points from the ball towards the field origin and has the
    field's constant magnitude. A ball sitting exactly on the origin has no
    defined direction and raises ``ZeroDivisionError``.
    """
    rel_x = env.origin[0] - pos[0]
    rel_y = env.origin[1] - pos[1]
    mag = math.hypot(rel_x, rel_y)
    unit_x = rel_x / mag
    unit_y = rel_y / mag
    return BallEnvironState(force=[env.force * unit_x, env.force * unit_y])


def state_default_data() -> tuple[BallStateInit, BallState]:
    """Return the default initial conditions and the state seeded from them."""
    init = BallStateInit(
        mass=10.0,
        location=[5.0, 5.0],
        speed=3.5,
        elevation=45.0 * DTR,
    )
    state = BallState(mass=init.mass, position=list(init.location))
    return init, state


def state_deriv(exec_data: BallExec, state: BallState) -> None:
    """Sum the collected forces into ``exec_data`` and set the acceleration of ``state``."""
    exec_data.force[0] = sum(f[0] for f in exec_data.collected_forces)
    exec_data.force[1] = sum(f[1] for f in exec_data.collected_forces)
    state.acceleration[0] = exec_data.force[0] / state.mass
    state.acceleration[1] = exec_data.force[1] / state.mass


def state_init(init: BallStateInit, state: BallState) -> None:
    """Set the position and velocity of ``state`` from the initial conditions."""
    state.position[0] = init.location[0]
    state.position[1] = init.location[1]
    state.velocity[0] = init.speed * math.cos(init.elevation)
    state.velocity[1] = init.speed * math.sin(init.elevation)


def format_position(sim_time: float, state: BallState) -> str:
    """Return the one-line position report for ``sim_time``."""
    return "time = %8.2f , position = %12.6f , %12.6f" % (
        sim_time,
        state.position[0],
        state.position[1],
    )


def ball_print(sim_time: float, exec_data: BallExec, state: BallState) -> None:
    """Print the position report unless output is switched off."""
    if not exec_data.print_off:
        print(format_position(sim_time, state))