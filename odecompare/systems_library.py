# odecompare/systems_library.py

import numpy as np
import logging

EQUATION = "y' = 2y"


class SystemModel:
    """
    Base class for all system models.
    Ensures that all models have a consistent interface.
    """
    def get_derivative(self, x, y):
        """
        Placeholder for the derivative function.
        This should be implemented by all subclasses.
        """
        raise NotImplementedError("The get_derivative method must be implemented by the subclass.")

    def solve_analytical(self, x_eval):
        raise NotImplementedError("The solve_analytical method must be implemented by the subclass.")


class GrowthSystem(SystemModel):
    """
    Represents the exponential growth equation y' = k*y (k = 2 by default).
    This class is the "ground truth" definition of the system's physics.
    """
    def __init__(self, x0=0.0, y0=1.0, k=2.0):
        self.x0 = x0
        self.y0 = y0
        self.k = k
        logging.info(f"GrowthSystem initialized for {self.equation} with x0={self.x0}, y0={self.y0}")

    @property
    def equation(self):
        return f"y' = {self.k:g}y"

    def get_derivative(self, x, y):
        """
        Defines the system's governing ODE: dy/dx = k*y.
        x is unused but kept so the signature matches any f(x, y).
        """
        return self.k * y

    @property
    def constant_of_integration(self):
        """C such that y(x) = C * e^(k*x) passes through (x0, y0)."""
        return self.y0 / np.exp(self.k * self.x0)

    def solve_analytical(self, x_eval):
        """Calculates the exact solution at the given x values."""
        return self.constant_of_integration * np.exp(self.k * x_eval)
