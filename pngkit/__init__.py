"""Building blocks for PNG images: chunk types, Adam7 interlacing, header info and APNG control data."""

__version__ = "0.1.0"

__all__ = ["adam7", "chunk", "control", "info", "types"]