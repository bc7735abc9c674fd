"""Job listing browser with a pure filtering and sorting engine."""

__version__ = "0.1.0"
