"""Regula Falsi iteration control used to locate zero crossings of event functions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

BIG_TGO = 1000.0
"""Time-to-go returned while the zero point has not yet been bracketed."""

_MAX_ITERATIONS = 20


class Mode(IntEnum):
    """Which direction of zero crossing the iteration reports."""

    DECREASING = -1
    ANY = 0
    INCREASING = 1


@dataclass
class RegulaFalsi:
    """State of a Regula Falsi search for the zero point of an error function."""

    lower_set: bool = False
    upper_set: bool = False
    iterations: int = 0
    fires: int = 0
    x_lower: float = BIG_TGO
    t_lower: float = 0.0
    x_upper: float = BIG_TGO
    t_upper: float = 0.0
    delta_time: float = BIG_TGO
    error: float = 0.0
    last_error: float = 0.0
    last_tgo: float = BIG_TGO
    error_tol: float = 1.0e-12
    mode: Mode = Mode.ANY
    function_slope: Mode = Mode.ANY

    def reset(self, time: float) -> None:
        """Clear the bounds and anchor both time boundaries at ``time``."""
        self.delta_time = BIG_TGO
        self.lower_set = False
        self.upper_set = False
        self.t_lower = time
        self.t_upper = time
        self.x_lower = BIG_TGO
        self.x_upper = BIG_TGO
        self.iterations = 0
        self.last_error = 0.0

    def _accept(self) -> float:
        self.last_error = self.error
        self.last_tgo = self.delta_time
        return self.delta_time

    def estimate(self, time: float) -> float:
        """Return the estimated time to go until the error function reaches zero.

        ``self.error`` must hold the error function value at ``time``.
        Returns exactly 0.0 once the zero point has been found, and
        ``BIG_TGO`` while no crossing has been bracketed.
        """
        if self.iterations > 0 and (
            abs(self.error) < self.error_tol
            or abs(self.last_error - self.error) < self.error_tol
        ):
            if self.mode is Mode.ANY:
                return 0.0
            if self.mode is Mode.INCREASING and self.lower_set:
                return 0.0
            if self.mode is Mode.DECREASING and self.upper_set:
                return 0.0

        if self.error < 0.0:
            self.x_lower = self.error
            self.t_lower = time
            self.lower_set = True
        elif self.error > 0.0:
            self.x_upper = self.error
            self.t_upper = time
            self.upper_set = True

        self.iterations += 1

        if self.upper_set and self.lower_set:
            if abs(self.error) < self.error_tol:
                self.delta_time = 0.0
            else:
                slope = (self.x_upper - self.x_lower) / (self.t_upper - self.t_lower)
                self.delta_time = -self.error / slope
                if self.iterations > _MAX_ITERATIONS:
                    self.delta_time = 0.0

            if self.mode is Mode.ANY:
                return self._accept()
            if self.mode is Mode.INCREASING:
                if self.function_slope is Mode.INCREASING:
                    return self._accept()
                self.lower_set = False
            elif self.mode is Mode.DECREASING:
                if self.function_slope is Mode.DECREASING:
                    return self._accept()
                self.upper_set = False
            self.function_slope = Mode.ANY
        elif self.lower_set:
            self.function_slope = Mode.INCREASING
        elif self.upper_set:
            self.function_slope = Mode.DECREASING

        self.iterations = 0
        self.last_tgo = BIG_TGO
        return BIG_TGO