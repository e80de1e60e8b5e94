# tests/conftest.py

import matplotlib

# Tests never open GUI windows.
matplotlib.use("Agg")
