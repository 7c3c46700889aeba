"""Display helpers for LeftoverLink."""

from .time_ago import time_ago

__all__ = ['time_ago']
