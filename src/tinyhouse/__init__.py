"""
TinyHouse Backend
GraphQL API for rentable listings and their bookings
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
