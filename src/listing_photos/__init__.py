"""Quality validation for vehicle listing photos."""

__version__ = "0.1.0"
