# odecompare/main.py

import argparse
import logging
import sys

from .display import display
from .errors import InputParseError, OdeCompareError
from .integrator import IntegrationParameters, integrate
from .presenter import DEFAULT_OUTPUT, DEFAULT_SIZE, render
from .report import print_table, save_csv
from .systems_library import EQUATION, GrowthSystem

# ==============================================================================
# SECTION 1: INPUT
# ==============================================================================

PROMPTS = (
    ('x0', "Initial values, x = ", float),
    ('y0', "                y = ", float),
    ('step_length', "      step length = ", float),
    ('step_count', "  number of steps = ", int),
)


def read_input(prompt, parse):
    """Reads one line from stdin and parses it; there is no second attempt."""
    try:
        text = input(prompt)
    except EOFError as exc:
        raise InputParseError(f"No input given for '{prompt.strip()}'") from exc
    try:
        return parse(text.strip())
    except ValueError as exc:
        raise InputParseError(f"Invalid input {text.strip()!r} for '{prompt.strip()}': expected {parse.__name__}") from exc


def read_parameters():
    values = {name: read_input(prompt, parse) for name, prompt, parse in PROMPTS}
    try:
        return IntegrationParameters(**values)
    except ValueError as exc:
        raise InputParseError(str(exc)) from exc


# ==============================================================================
# SECTION 2: MAIN EXECUTION BLOCK
# ==============================================================================

def positive_int(text):
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        description="Solve y' = 2y with Euler's method and the midpoint method and plot both against the exact solution."
    )
    parser.add_argument('--output', type=str, default=DEFAULT_OUTPUT, help='Path of the PNG chart to write.')
    parser.add_argument('--width', type=positive_int, default=DEFAULT_SIZE[0], help='Chart width in pixels.')
    parser.add_argument('--height', type=positive_int, default=DEFAULT_SIZE[1], help='Chart height in pixels.')
    parser.add_argument('--csv', type=str, default=None, help='Also save the result table to this CSV file.')
    parser.add_argument('--no-display', action='store_true', help='Write the chart but do not open a window.')
    parser.add_argument('--log-level', type=str.upper, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], help='Logging level (DEBUG, INFO, WARNING, ...).')
    return parser


def run(args):
    print(f"Solving the equation {EQUATION} using Euler's method and Midpoint method.")
    params = read_parameters()
    print()

    system = GrowthSystem(x0=params.x0, y0=params.y0)
    series = integrate(params, system.get_derivative, exact=system.solve_analytical)
    print_table(series)

    if args.csv:
        save_csv(series, args.csv)

    artifact = render(series, path=args.output, size=(args.width, args.height))
    print(f"Result has been saved to {artifact.path}")
    if not args.no_display:
        display(artifact)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        run(args)
    except OdeCompareError as exc:
        logging.error(f"{type(exc).__name__}: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
