"""Shared pytest configuration."""

import matplotlib

# Tests render to files only
matplotlib.use("Agg")
