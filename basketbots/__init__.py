"""Top-down robot basketball simulation and a grid-world map viewer."""

__version__ = "0.1.0"