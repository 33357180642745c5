"""Data model, sensor configuration and events for Brilliant Sole insoles and gloves."""

__version__ = "0.1.0"