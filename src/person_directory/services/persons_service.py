"""
Persons service - storage accessor for the persons table
"""

import logging
import sqlite3

from person_directory.database.connection import SQLiteDatabase
from person_directory.models.enums import ServiceErrorType
from person_directory.models.person import Person
from person_directory.services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

PERSONS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS persons (
    id INTEGER NOT NULL PRIMARY KEY,
    name CHAR(40) NOT NULL,
    email CHAR(50),
    mobile CHAR(25) NOT NULL
)
"""


class PersonsService(BaseService):
    """Service for person record operations"""

    def __init__(self, database: SQLiteDatabase):
        super().__init__(database, "persons", "id", ["name", "email", "mobile"])

    def ensure_schema(self) -> ServiceResult:
        """Create the persons table if it does not exist yet"""
        try:
            with self.database.connect() as conn:
                conn.execute(PERSONS_TABLE_DDL)
        except sqlite3.Error as e:
            logger.error(f"Error creating '{self.table_name}' table: {e}")
            return ServiceResult(
                success=False,
                error=f"Schema creation failed: {e}",
                error_type=ServiceErrorType.DATABASE_ERROR
            )
        logger.info(f"Table '{self.table_name}' is ready")
        return ServiceResult(success=True)

    def insert_person(self, person: Person) -> ServiceResult:
        """
        Insert a new person

        Any id on the given person is ignored; SQLite assigns a new one.

        Returns:
            ServiceResult with the persisted Person and its new id in last_row_id
        """
        result = self.create({
            "name": person.name,
            "email": person.email,
            "mobile": person.mobile
        })
        if result.success:
            created = person.model_copy(update={"id": result.last_row_id})
            result.data = [created]
            logger.info(f"Created person with ID: {created.id}")
        return result

    def list_persons(self) -> ServiceResult:
        """Get all persons in insertion order"""
        result = self.read_all()
        if result.success:
            result.data = [Person(**row) for row in result.data]
        return result

    def get_person_by_id(self, person_id: int) -> ServiceResult:
        """
        Get a person by ID

        Returns:
            ServiceResult with a single Person, or RESOURCE_NOT_FOUND
        """
        result = self.get_by_id(person_id)
        if result.success:
            result.data = [Person(**row) for row in result.data]
        else:
            logger.info(f"Error getting person by ID {person_id}: {result.error}")
        return result

    def update_person(self, person: Person) -> ServiceResult:
        """
        Overwrite name, email and mobile of a persisted person

        Args:
            person: Person carrying the id of the row to overwrite

        Returns:
            ServiceResult with the updated Person; INVALID_ARGUMENT when the
            person has no id, RESOURCE_NOT_FOUND when no row has it
        """
        if not person.is_persisted:
            return ServiceResult(
                success=False,
                error="Person ID is missing, cannot update",
                error_type=ServiceErrorType.INVALID_ARGUMENT
            )

        logger.info(f"Updating person with ID: {person.id}")
        result = self.update(person.id, {
            "name": person.name,
            "email": person.email,
            "mobile": person.mobile
        })
        if result.success:
            result.data = [person]
        return result

    def delete_person(self, person_id: int) -> ServiceResult:
        """Delete a person by ID; deleting an unknown ID succeeds with count 0"""
        result = self.delete(person_id)
        if result.success:
            logger.info(f"Deleted {result.count} person(s) with ID: {person_id}")
        return result
