"""Time-grid layout engine for the day/week planner."""

__version__ = "1.0.0"
