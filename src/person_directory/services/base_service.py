"""
Base service layer for single-table SQLite operations
"""

import logging
import sqlite3
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from person_directory.database.connection import SQLiteDatabase
from person_directory.models.enums import ServiceErrorType

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Any]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[ServiceErrorType] = None
    last_row_id: Optional[int] = None


class BaseService:
    """
    CRUD over one table, one parameterized statement per call.

    Column names come only from the ``columns`` whitelist given at
    construction; values are always bound as ``?`` parameters.
    """

    def __init__(self, database: SQLiteDatabase, table_name: str, primary_key: str, columns: Sequence[str]):
        self.database = database
        self.table_name = table_name
        self.primary_key = primary_key
        self.columns = list(columns)
        logger.info(f"BaseService initialized for table: {table_name}")

    def create(self, data: Dict[str, Any]) -> ServiceResult:
        """
        Insert a new row

        Args:
            data: Column values; the primary key is left to the database

        Returns:
            ServiceResult with count and last_row_id of the new row
        """
        invalid = self._check_columns(data)
        if invalid:
            return invalid

        fields = list(data.keys())
        placeholders = ", ".join("?" for _ in fields)
        query = f"INSERT INTO {self.table_name} ({', '.join(fields)}) VALUES ({placeholders})"
        return self._execute_write("INSERT", query, [data[f] for f in fields])

    def read_all(self) -> ServiceResult:
        """Read every row ordered by primary key"""
        query = (
            f"SELECT {self.primary_key}, {', '.join(self.columns)} "
            f"FROM {self.table_name} ORDER BY {self.primary_key}"
        )
        return self._execute_read("READ", query, [])

    def get_by_id(self, record_id: int) -> ServiceResult:
        """
        Get a single row by primary key

        Returns:
            ServiceResult with one row, or RESOURCE_NOT_FOUND
        """
        query = (
            f"SELECT {self.primary_key}, {', '.join(self.columns)} "
            f"FROM {self.table_name} WHERE {self.primary_key} = ?"
        )
        result = self._execute_read("READ", query, [record_id], record_id=record_id)
        if result.success and not result.data:
            return ServiceResult(
                success=False,
                error=f"Record not found with ID: {record_id}",
                error_type=ServiceErrorType.RESOURCE_NOT_FOUND
            )
        return result

    def update(self, record_id: int, data: Dict[str, Any]) -> ServiceResult:
        """
        Overwrite columns of the row with the given primary key

        Returns:
            ServiceResult with the affected row count, or RESOURCE_NOT_FOUND
            when no row has that key
        """
        invalid = self._check_columns(data)
        if invalid:
            return invalid

        fields = list(data.keys())
        assignments = ", ".join(f"{f} = ?" for f in fields)
        query = f"UPDATE {self.table_name} SET {assignments} WHERE {self.primary_key} = ?"
        result = self._execute_write(
            "UPDATE", query, [data[f] for f in fields] + [record_id], record_id=record_id
        )
        if result.success and result.count == 0:
            return ServiceResult(
                success=False,
                error=f"Record not found with ID: {record_id}",
                error_type=ServiceErrorType.RESOURCE_NOT_FOUND
            )
        return result

    def delete(self, record_id: int) -> ServiceResult:
        """
        Delete the row with the given primary key

        A missing row is not an error; the result then has ``count == 0``.
        """
        query = f"DELETE FROM {self.table_name} WHERE {self.primary_key} = ?"
        return self._execute_write("DELETE", query, [record_id], record_id=record_id)

    def _check_columns(self, data: Dict[str, Any]) -> Optional[ServiceResult]:
        unknown = [field for field in data if field not in self.columns]
        if unknown:
            return ServiceResult(
                success=False,
                error=f"Unknown fields for {self.table_name}: {', '.join(unknown)}",
                error_type=ServiceErrorType.INVALID_ARGUMENT
            )
        if not data:
            return ServiceResult(
                success=False,
                error="No fields provided",
                error_type=ServiceErrorType.INVALID_ARGUMENT
            )
        return None

    def _execute_write(
        self, operation: str, query: str, params: List[Any], record_id: Optional[int] = None
    ) -> ServiceResult:
        """Execute INSERT/UPDATE/DELETE and report affected rows"""
        logger.debug(f"Executing {operation}: {query}")
        try:
            with self.database.connect() as conn:
                cursor = conn.execute(query, params)
                return ServiceResult(
                    success=True,
                    count=cursor.rowcount,
                    last_row_id=cursor.lastrowid
                )
        except (sqlite3.Error, OverflowError) as e:
            return self._failure(operation, e, record_id)

    def _execute_read(
        self, operation: str, query: str, params: List[Any], record_id: Optional[int] = None
    ) -> ServiceResult:
        """Execute SELECT and return rows as dictionaries"""
        logger.debug(f"Executing {operation}: {query}")
        try:
            with self.database.connect() as conn:
                rows = [dict(row) for row in conn.execute(query, params).fetchall()]
            return ServiceResult(success=True, data=rows, count=len(rows))
        except (sqlite3.Error, OverflowError) as e:
            return self._failure(operation, e, record_id)

    def _failure(self, operation: str, exc: Exception, record_id: Optional[int]) -> ServiceResult:
        # Column values are personal data and stay out of the log
        if isinstance(exc, OverflowError):
            logger.warning(f"{operation} rejected for {self.table_name} (id={record_id}): {exc}")
            return ServiceResult(
                success=False,
                error="Value out of range for an SQLite INTEGER",
                error_type=ServiceErrorType.INVALID_ARGUMENT
            )

        logger.error(
            f"{operation} operation failed for {self.table_name} (id={record_id}): {exc}",
            exc_info=True
        )
        if isinstance(exc, sqlite3.IntegrityError):
            return ServiceResult(
                success=False,
                error=f"Constraint violation: {exc}",
                error_type=ServiceErrorType.CONSTRAINT_ERROR
            )
        return ServiceResult(
            success=False,
            error=f"Database {operation} failed: {exc}",
            error_type=ServiceErrorType.DATABASE_ERROR
        )
