"""Cycle-based hospital ward simulation: patient table, waiting deque, beds and discharge history."""

__version__ = "0.1.0"
__all__ = ["patient", "queue", "beds", "history", "simulation"]