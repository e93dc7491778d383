"""Errors raised by the I/O layers around the engine."""

from __future__ import annotations


class HoldmapError(Exception):
    """Base class for holdmap errors."""


class ImageLoadError(HoldmapError):
    """An image could not be read or decoded."""


class ConfigurationLoadError(HoldmapError):
    """A hold configuration or selection document could not be loaded."""
