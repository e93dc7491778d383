"""holdmap: climbing-wall hold outlines from binary map images."""

__version__ = "0.1.0"
