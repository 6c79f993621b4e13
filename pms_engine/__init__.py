"""PMS Engine: workflow and performance-scoring rule engines."""

__version__ = "1.0.0"
