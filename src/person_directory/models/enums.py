"""
Enum definitions for the Person Directory Backend
"""

from enum import Enum


class ServiceErrorType(str, Enum):
    """
    Failure categories reported by the service layer.

    - RESOURCE_NOT_FOUND: no row matches the requested id
    - INVALID_ARGUMENT: the call was rejected before reaching the database
    - CONSTRAINT_ERROR: the database refused the row (NOT NULL, PRIMARY KEY)
    - DATABASE_ERROR: any other SQLite failure
    """
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    CONSTRAINT_ERROR = "CONSTRAINT_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
