"""Multiple-choice question practice server."""

__version__ = "1.0.0"
