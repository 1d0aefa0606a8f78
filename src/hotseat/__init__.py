"""Two-player same-screen chess with a full rules engine."""

__version__ = "0.1.0"
