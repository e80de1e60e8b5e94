# ==============================================================================
# odecompare/presenter.py
# Renders the Euler / midpoint / exact trajectories to a fixed-size PNG chart
# ==============================================================================

import logging
import os
from dataclasses import dataclass

import matplotlib.pyplot as plt
import numpy as np

from .errors import RenderError

DEFAULT_OUTPUT = "euler_method.png"
DEFAULT_SIZE = (640, 480)
DPI = 100

CAPTION = "Euler's Method Approximations"
SERIES_STYLES = (
    ('euler', 'Approx y (Euler)', 'blue'),
    ('midpoint', 'Approx y (Midpoint)', 'green'),
    ('exact', 'Exact y', 'red'),
)


@dataclass(frozen=True)
class AxisBounds:
    x_min: float
    x_max: float
    y_min: float
    y_max: float


@dataclass(frozen=True)
class RenderedArtifact:
    path: str
    width: int
    height: int


def compute_axis_bounds(series) -> AxisBounds:
    """
    x spans the first to the last x value. y spans the minimum of the Euler
    series to the maximum of the exact series; the midpoint series and the
    other extremes are not considered.
    """
    if len(series) == 0:
        raise RenderError("Cannot compute axis bounds for an empty result series.")
    return AxisBounds(
        x_min=float(series.x[0]),
        x_max=float(series.x[-1]),
        y_min=float(np.min(series.euler)),
        y_max=float(np.max(series.exact)),
    )


def chart_path(path):
    """Appends '.png' to an extensionless path; any other extension is refused."""
    _, ext = os.path.splitext(path)
    if not ext:
        return path + '.png'
    if ext.lower() != '.png':
        raise RenderError(f"Chart path '{path}' must end in .png, got '{ext}'.")
    return path


def render(series, path=DEFAULT_OUTPUT, size=DEFAULT_SIZE) -> RenderedArtifact:
    """
    Draws the three series with a legend and writes them to `path` as a PNG
    of exactly `size` pixels (width, height).

    Raises:
        RenderError: If the series is empty, the bounds are not finite, the
                     size is not positive, the path is not a .png file, or
                     matplotlib fails to draw or encode the image.
    """
    bounds = compute_axis_bounds(series)
    if not np.all(np.isfinite([bounds.x_min, bounds.x_max, bounds.y_min, bounds.y_max])):
        raise RenderError(f"Cannot plot non-finite axis bounds: {bounds}")

    width, height = size
    if width <= 0 or height <= 0:
        raise RenderError(f"Chart size must be positive, got {width}x{height}.")
    path = chart_path(path)

    fig = None
    try:
        fig = plt.figure(figsize=(width / DPI, height / DPI), dpi=DPI, facecolor='white')
        if fig.canvas.get_width_height() != (width, height):
            raise RenderError(f"Cannot create a {width}x{height} figure at {DPI} dpi.")

        ax = fig.add_subplot(111)
        for name, label, color in SERIES_STYLES:
            ax.plot(series.x, getattr(series, name), color=color, label=label)

        ax.set_title(CAPTION, fontsize=16)
        ax.set_xlim(bounds.x_min, bounds.x_max)
        ax.set_ylim(bounds.y_min, bounds.y_max)
        ax.set_xlabel('x')
        ax.set_ylabel('y')
        ax.grid(True)
        ax.legend(loc='upper left', facecolor='white', framealpha=0.8, edgecolor='black')

        fig.savefig(path, format='png', dpi=DPI, facecolor='white')
    except (ValueError, OSError, RuntimeError) as exc:
        raise RenderError(f"Failed to render chart to '{path}': {exc}") from exc
    finally:
        if fig is not None:
            plt.close(fig)

    logging.info(f"Saved chart to {os.path.abspath(path)}")
    return RenderedArtifact(path=path, width=width, height=height)
