"""Concurrent HTTP health monitoring with console reporting."""

__version__ = "0.1.0"
__all__ = ["aggregator", "checker", "cli", "config", "reporter"]