"""rosterctl — interactive registry of employees and their departments."""

__version__ = "0.1.0"
