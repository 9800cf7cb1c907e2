"""In-memory student records with an interactive menu, and a six-digit stopwatch model."""

__version__ = "0.1.0"
__all__ = ["students", "cli", "stopwatch"]