# odecompare/__init__.py

from .errors import DisplayError, InputParseError, OdeCompareError, RenderError
from .integrator import IntegrationParameters, ResultSeries, integrate
from .presenter import RenderedArtifact, compute_axis_bounds, render
from .systems_library import GrowthSystem
