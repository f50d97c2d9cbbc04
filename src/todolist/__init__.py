"""Single-screen to-do list sorted by priority."""

__version__ = "0.1.0"
