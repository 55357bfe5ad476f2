"""Classic algorithms, data structures, text patterns and small utilities."""

__version__ = "0.1.0"