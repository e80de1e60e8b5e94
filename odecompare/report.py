# odecompare/report.py

import logging
import os

HEADER_FORMAT = "{:>6} {:>16} {:>16} {:>16}"
ROW_FORMAT = "{:>6.2f} {:>16.10f} {:>16.10f} {:>16.10f}"


def format_header():
    return [
        HEADER_FORMAT.format("x", "approx y (Euler)", "approx y (Midpoint)", "exact y"),
        HEADER_FORMAT.format("-", "----------------", "-----------------", "-------"),
    ]


def format_row(x, y_euler, y_midpoint, y_exact):
    return ROW_FORMAT.format(x, y_euler, y_midpoint, y_exact)


def format_table(series):
    """Returns the header lines followed by one line per step of the series."""
    lines = format_header()
    for x, y_euler, y_midpoint, y_exact in zip(series.x, series.euler, series.midpoint, series.exact):
        lines.append(format_row(x, y_euler, y_midpoint, y_exact))
    return lines


def print_table(series):
    for line in format_table(series):
        print(line)


def save_csv(series, path):
    """Saves the series (plus absolute errors) to a CSV file using pandas."""
    df = series.to_frame()
    for name, err in series.errors().items():
        df[f'{name}_error'] = err
    df.to_csv(path, index=False)
    logging.info(f"Saved result table to {os.path.abspath(path)}")
    return path
