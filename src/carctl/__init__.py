"""carctl — car configuration builder and report generator."""

__version__ = "0.1.0"
