"""Scene parsing, map validation and software raycasting for grid-based first person maps."""

__version__ = "0.1.0"