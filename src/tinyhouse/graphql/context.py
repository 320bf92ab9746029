"""
Request context helpers for GraphQL resolvers
"""

from typing import Any

import strawberry

from ..database.base import Database
from ..database.connection import get_database


def get_db_from_info(info: strawberry.Info) -> Database:
    """Return the database carried by the request context.

    Falls back to the shared process database when the context has none,
    which is the case for schema executions outside the FastAPI router.
    """
    context: Any = info.context
    if isinstance(context, dict) and context.get("db") is not None:
        return context["db"]
    return get_database()
