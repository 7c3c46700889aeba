"""API routers for LeftoverLink"""

from . import listings

__all__ = ["listings"]
