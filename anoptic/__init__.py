"""Game engine runtime utilities: timing, buffered logging, frame timing, paths and glTF loading."""

__version__ = "0.1.0"