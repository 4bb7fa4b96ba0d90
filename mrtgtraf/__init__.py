"""MRTG traffic check plugin."""

__version__ = "0.1.0"
