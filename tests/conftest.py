import os

# Plots are saved to files during the tests, never shown
os.environ.setdefault("MPLBACKEND", "Agg")
