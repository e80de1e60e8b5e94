# ==============================================================================
# odecompare/integrator.py
# Fixed-step Euler and explicit midpoint integration of a scalar ODE y' = f(x, y)
# ==============================================================================

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import numpy as np
import pandas as pd

from .systems_library import GrowthSystem

DerivativeFn = Callable[[float, float], float]
ExactFn = Callable[[float], float]


@dataclass(frozen=True)
class IntegrationParameters:
    """Initial state, step length and number of steps for one run."""
    x0: float
    y0: float
    step_length: float
    step_count: int

    def __post_init__(self):
        if isinstance(self.step_count, bool) or not isinstance(self.step_count, (int, np.integer)):
            raise ValueError(f"step_count must be an integer, got {self.step_count!r}")
        if self.step_count < 0:
            raise ValueError(f"step_count must be non-negative, got {self.step_count}")
        if self.step_length == 0:
            raise ValueError("step_length must be non-zero")


@dataclass
class EulerState:
    x: float
    y: float

    def step(self, f: DerivativeFn, h: float):
        # Forward Euler: slope taken at the start of the interval.
        self.y = self.y + h * f(self.x, self.y)
        self.x = self.x + h


@dataclass
class MidpointState:
    x: float
    y: float

    def step(self, f: DerivativeFn, h: float):
        # Half-step probe from the pre-step point, then a full step with the midpoint slope.
        mid_x = self.x + h / 2.0
        mid_y = self.y + (h / 2.0) * f(self.x, self.y)
        self.y = self.y + h * f(mid_x, mid_y)
        self.x = self.x + h


class ResultSeries:
    """
    Index-aligned x, Euler, midpoint and exact sequences, one entry per step.

    Entries are appended while integrating. finalize() turns the four lists
    into read-only numpy arrays; after that the series can no longer grow.
    """
    columns = ('x', 'euler', 'midpoint', 'exact')

    def __init__(self):
        self.x = []
        self.euler = []
        self.midpoint = []
        self.exact = []
        self.finalized = False

    def append(self, x, y_euler, y_midpoint, y_exact):
        if self.finalized:
            raise RuntimeError("Cannot append to a finalized ResultSeries.")
        self.x.append(x)
        self.euler.append(y_euler)
        self.midpoint.append(y_midpoint)
        self.exact.append(y_exact)

    def finalize(self):
        if not self.finalized:
            for name in self.columns:
                values = np.asarray(getattr(self, name), dtype=float)
                values.setflags(write=False)
                setattr(self, name, values)
            self.finalized = True
        return self

    def __len__(self):
        return len(self.x)

    def errors(self) -> Dict[str, np.ndarray]:
        """Absolute error of each approximation against the exact values."""
        exact = np.asarray(self.exact, dtype=float)
        return {
            'euler': np.abs(np.asarray(self.euler, dtype=float) - exact),
            'midpoint': np.abs(np.asarray(self.midpoint, dtype=float) - exact),
        }

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({name: np.asarray(getattr(self, name), dtype=float) for name in self.columns})


def integrate(params: IntegrationParameters, f: DerivativeFn, exact: Optional[ExactFn] = None) -> ResultSeries:
    """
    Advances Euler and midpoint approximations side by side for params.step_count steps.

    Args:
        params: Initial state (x0, y0), step length and step count.
        f: The right-hand side f(x, y) of the ODE.
        exact: Closed-form solution y(x). Defaults to C * e^(2x) with
               C = y0 / e^(2*x0), the solution of y' = 2y through (x0, y0).

    Returns:
        A finalized ResultSeries with exactly params.step_count entries. The
        first entry is the state after one step, not the initial condition.
    """
    if exact is None:
        exact = GrowthSystem(x0=params.x0, y0=params.y0).solve_analytical

    h = params.step_length
    euler_state = EulerState(params.x0, params.y0)
    midpoint_state = MidpointState(params.x0, params.y0)
    series = ResultSeries()

    for _ in range(params.step_count):
        euler_state.step(f, h)
        midpoint_state.step(f, h)
        x = euler_state.x
        series.append(x, euler_state.y, midpoint_state.y, exact(x))

    series.finalize()

    if len(series):
        final_errors = {name: err[-1] for name, err in series.errors().items()}
        logging.info(
            f"Integrated {len(series)} steps of h={h} to x={series.x[-1]:.4f} | "
            f"Euler error: {final_errors['euler']:.3e} | Midpoint error: {final_errors['midpoint']:.3e}"
        )
    else:
        logging.info("Integrated 0 steps; result series is empty.")
    return series
