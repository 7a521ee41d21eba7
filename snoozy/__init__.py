"""snoozy — infant sleep tracking and sleep statistics."""

__version__ = "1.0.0"
