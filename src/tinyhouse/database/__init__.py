"""
Document store module for TinyHouse backend
"""

from .base import Collection, Database, StoreConnectionError, StoreException
from .connection import close_database, get_database, init_database, reset_database

__all__ = [
    "Collection",
    "Database",
    "StoreException",
    "StoreConnectionError",
    "close_database",
    "get_database",
    "init_database",
    "reset_database",
]
