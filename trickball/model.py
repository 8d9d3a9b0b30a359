"""The bouncing-ball model with value references, states and derivatives."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable

from trickball.ball import (
    BallEnviron,
    BallEnvironState,
    BallExec,
    BallState,
    BallStateInit,
    environ_default_data,
    force_field,
    state_default_data,
    state_deriv,
    state_init,
)
from trickball.regula_falsi import RegulaFalsi
from trickball.status import Status

TYPE_NAME = "trickBall"
GUID = "{Trick_Ball_Model_Version_0.0.0}"
NUM_MODEL_EVENTS = 0
NUM_MODEL_STATES = 4

# Each real value reference names (component, attribute, index or None).
_REAL_VARIABLES: tuple[tuple[str, str, int | None], ...] = (
    ("ball_state", "position", 0),
    ("ball_state", "position", 1),
    ("ball_state", "velocity", 0),
    ("ball_state", "velocity", 1),
    ("ball_state", "acceleration", 0),
    ("ball_state", "acceleration", 1),
    ("ball_state", "mass", None),
    ("env_state", "force", 0),
    ("env_state", "force", 1),
    ("env", "origin", 0),
    ("env", "origin", 1),
    ("env", "force", None),
)

# Continuous states and their derivatives, as real value references.
_STATE_REFS = (0, 1, 2, 3)
_DERIV_REFS = (2, 3, 4, 5)

# State event indicator functions by event id; the ball defines none, so
# every id falls through to the default indicator value.
_EVENT_INDICATORS: dict[int, Callable[[BallModel], float]] = {}
_DEFAULT_EVENT_INDICATOR = 0.0


class ModelMode(Enum):
    """Lifecycle mode of a model instance."""

    INSTANTIATED = "instantiated"
    INIT_MODE = "initialization"
    EVENT_MODE = "event"
    CONTINUOUS_TIME_MODE = "continuous-time"
    TERMINATED = "terminated"


@dataclass
class EventInfo:
    """Event information reported back to the simulation environment."""

    new_discrete_states_needed: bool = False
    values_of_continuous_states_changed: bool = False
    nominals_of_continuous_states_changed: bool = False
    terminate_simulation: bool = False
    next_event_time_defined: bool = False
    next_event_time: float = 0.0


def _variable_name(spec: tuple[str, str, int | None]) -> str:
    component, attr, index = spec
    suffix = "" if index is None else f"[{index}]"
    return f"{component}.{attr}{suffix}"


class BallModel:
    """A ball in a central constant force field, exposed through numbered real variables.

    Creating a model sets its start values, as instantiation does.
    """

    type_name = TYPE_NAME
    guid = GUID
    num_reals = len(_REAL_VARIABLES)
    num_ints = 0
    num_bools = 0
    num_strs = 0
    num_events = NUM_MODEL_EVENTS
    num_states = NUM_MODEL_STATES

    def __init__(self, instance_name: str = TYPE_NAME, debug_on: bool = False) -> None:
        self.instance_name = instance_name
        self.debug_on = debug_on
        self.time = 0.0
        self.mode = ModelMode.INSTANTIATED
        self.update_values = False

        self.exec_data = BallExec()
        self.state_init = BallStateInit()
        self.ball_state = BallState()
        self.env = BallEnviron()
        self.env_state = BallEnvironState()

        self.event_flags = [False] * self.num_events
        self.rf_events = [RegulaFalsi() for _ in range(self.num_events)]

        # The environment force is the single collected external force.
        self.exec_data.collected_forces = [self.env_state.force]

        if self.debug_on:
            print(self.describe_collect())

        self.set_start_values()

    # -- variable access -------------------------------------------------

    def _spec(self, ref: int) -> tuple[str, str, int | None]:
        if not 0 <= ref < len(_REAL_VARIABLES):
            raise ValueError(f"invalid real value reference: {ref}")
        return _REAL_VARIABLES[ref]

    def _read(self, ref: int) -> float:
        component, attr, index = self._spec(ref)
        value = getattr(getattr(self, component), attr)
        return value if index is None else value[index]

    def _write(self, ref: int, value: float) -> None:
        component, attr, index = self._spec(ref)
        target = getattr(self, component)
        if index is None:
            setattr(target, attr, float(value))
        else:
            getattr(target, attr)[index] = float(value)

    def get_real(self, refs: Iterable[int]) -> list[float]:
        """Return the real variables named by ``refs``, refreshing computed values first."""
        refs = list(refs)
        for ref in refs:
            self._spec(ref)
        if self.update_values:
            self.calculate_values()
            self.update_values = False
        return [self._read(ref) for ref in refs]

    def set_real(self, refs: Iterable[int], values: Iterable[float]) -> None:
        """Set the real variables named by ``refs`` to ``values``."""
        refs = list(refs)
        values = list(values)
        if len(refs) != len(values):
            raise ValueError(
                f"{len(refs)} value references given for {len(values)} values"
            )
        for ref in refs:
            self._spec(ref)
        for ref, value in zip(refs, values):
            self._write(ref, value)
        self.update_values = True

    def get_continuous_states(self) -> list[float]:
        """Return position and velocity as the continuous state vector."""
        return [self._read(ref) for ref in _STATE_REFS]

    def set_continuous_states(self, values: Iterable[float]) -> None:
        """Set position and velocity from a continuous state vector."""
        values = list(values)
        if len(values) != self.num_states:
            raise ValueError(
                f"expected {self.num_states} states, got {len(values)}"
            )
        for ref, value in zip(_STATE_REFS, values):
            self._write(ref, value)

    def get_derivatives(self) -> list[float]:
        """Return the state derivatives evaluated at the current states."""
        self.calculate_derivatives()
        return [self._read(ref) for ref in _DERIV_REFS]

    # -- model behaviour -------------------------------------------------

    def set_start_values(self) -> None:
        """Load default data, initialise the state and evaluate the derivatives."""
        self.env = environ_default_data()
        self.state_init, self.ball_state = state_default_data()
        state_init(self.state_init, self.ball_state)
        self.calculate_derivatives()
        if self.debug_on:
            print(self.describe_states())
        self.update_values = True

    def calculate_derivatives(self) -> None:
        """Update the field force on the ball and the resulting acceleration."""
        self.env_state.force[:] = force_field(self.env, self.ball_state.position).force
        state_deriv(self.exec_data, self.ball_state)

    def calculate_values(self) -> None:
        """Recompute dependent values; only done during initialisation mode."""
        if self.mode is ModelMode.INIT_MODE:
            self.calculate_derivatives()

    def integrate(self, integ_step: float) -> Status:
        """Advance the state and time by ``integ_step`` with a second-order Runge-Kutta step."""
        dto2 = integ_step / 2.0

        self.calculate_derivatives()
        work_state = self.get_continuous_states()
        work_deriv = [self._read(ref) for ref in _DERIV_REFS]

        self.set_continuous_states(
            state + integ_step * deriv for state, deriv in zip(work_state, work_deriv)
        )

        self.time += integ_step
        end_deriv = self.get_derivatives()

        self.set_continuous_states(
            state + (start + end) * dto2
            for state, start, end in zip(work_state, work_deriv, end_deriv)
        )

        self.calculate_derivatives()
        return Status.OK

    def get_event_indicator(self, event_id: int) -> float:
        """Return the state event indicator for ``event_id``.

        Ids without an indicator function yield the default value, 0.0; this
        model defines no state events, so every id does.
        """
        indicator = _EVENT_INDICATORS.get(event_id)
        if indicator is None:
            return _DEFAULT_EVENT_INDICATOR
        return indicator(self)

    def activate_events(self, time_event: bool) -> EventInfo:
        """Process events and return the resulting event information."""
        # The model defines no time or state events.
        return EventInfo()

    # -- diagnostics -----------------------------------------------------

    def describe_refs(self) -> str:
        """Describe how each real, state and derivative maps onto model variables."""
        lines = []
        for ref, spec in enumerate(_REAL_VARIABLES):
            lines.append(f"&Real[{ref}] - {_variable_name(spec)}")
            lines.append("Real[%d] = %g" % (ref, self._read(ref)))
        for index, (sref, dref) in enumerate(zip(_STATE_REFS, _DERIV_REFS)):
            lines.append(f"&State[{index}] - {_variable_name(_REAL_VARIABLES[sref])}")
            lines.append("State[%d] = %g" % (index, self._read(sref)))
            lines.append(f"&Deriv[{index}] - {_variable_name(_REAL_VARIABLES[dref])}")
            lines.append("Deriv[%d] = %g" % (index, self._read(dref)))
        return "\n".join(lines)

    def describe_collect(self) -> str:
        """Describe the forces collected into the ball's external force."""
        forces = self.exec_data.collected_forces
        lines = [f"Number in collect: {len(forces)}"]
        lines.extend(
            "Force in collect %d: %g , %g" % (index, force[0], force[1])
            for index, force in enumerate(forces)
        )
        return "\n".join(lines)

    def describe_states(self) -> str:
        """Return the current time and ball state as multi-line text."""
        state = self.ball_state
        force = self.env_state.force
        return "\n".join(
            [
                "time = %f" % self.time,
                "   position = %12.6f , %12.6f" % tuple(state.position),
                "   velocity = %12.6f , %12.6f" % tuple(state.velocity),
                "   accel    = %12.6f , %12.6f" % tuple(state.acceleration),
                "   force    = %12.6f , %12.6f" % tuple(force),
                "   mass     = %12.6f" % state.mass,
            ]
        )