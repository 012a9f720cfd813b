"""StayHub booking platform core."""

__version__ = "1.0.0"
