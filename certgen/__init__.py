"""Certificate payload assembly for vehicle inspection test results."""

__version__ = "0.1.0"
