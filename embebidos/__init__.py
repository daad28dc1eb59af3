"""Arduino sensor data collection and numeric analysis tools."""

__version__ = "0.1.0"