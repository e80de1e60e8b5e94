# odecompare/errors.py


class OdeCompareError(Exception):
    """Base class for every failure that ends a run with a non-zero exit code."""


class InputParseError(OdeCompareError):
    """User input could not be parsed as the expected number."""


class RenderError(OdeCompareError):
    """The chart could not be built, drawn or encoded."""


class DisplayError(OdeCompareError):
    """The rendered chart could not be reopened or shown in a window."""
