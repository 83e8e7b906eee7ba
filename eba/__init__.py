"""Build and release Electron apps from CI."""

__version__ = "1.0.0"
