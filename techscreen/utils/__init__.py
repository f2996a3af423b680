"""Utility modules for logging."""

from .logging import setup_logging

__all__ = ["setup_logging"]
