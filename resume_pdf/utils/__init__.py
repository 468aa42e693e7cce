"""Helper utilities."""

from .logger import console, setup_logging

__all__ = ["console", "setup_logging"]
