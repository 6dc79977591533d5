"""
Storage accessor tests: PersonsService against a real SQLite file
"""

import logging
from unittest.mock import MagicMock

import pytest

from person_directory.database.connection import SQLiteDatabase
from person_directory.models.enums import ServiceErrorType
from person_directory.models.person import Person
from person_directory.services.persons_service import PersonsService


class TestSchema:
    """Table creation"""

    def test_ensure_schema_is_idempotent(self, persons_service):
        assert persons_service.ensure_schema().success
        assert persons_service.ensure_schema().success

    def test_ensure_schema_reports_unusable_path(self, tmp_path):
        # A directory cannot be opened as a database file
        service = PersonsService(SQLiteDatabase(str(tmp_path)))

        result = service.ensure_schema()

        assert not result.success
        assert result.error_type == ServiceErrorType.DATABASE_ERROR


class TestInsertAndRead:
    """Insert, list and get-by-id"""

    def test_list_is_empty_before_any_insert(self, persons_service):
        result = persons_service.list_persons()

        assert result.success
        assert result.data == []
        assert result.count == 0

    def test_insert_assigns_id(self, persons_service):
        result = persons_service.insert_person(Person(name="A", email="a@x.com", mobile="123"))

        assert result.success
        assert result.count == 1
        assert result.last_row_id is not None and result.last_row_id >= 1
        assert result.data[0].id == result.last_row_id
        assert result.data[0].is_persisted

    def test_insert_ignores_caller_supplied_id(self, persons_service):
        first = persons_service.insert_person(Person(name="A", mobile="1"))
        second = persons_service.insert_person(Person(id=first.last_row_id, name="B", mobile="2"))

        assert second.success
        assert second.last_row_id != first.last_row_id
        assert persons_service.list_persons().count == 2

    def test_created_person_listed_exactly_once(self, persons_service):
        created = persons_service.insert_person(Person(name="A", email="a@x.com", mobile="123"))

        persons = persons_service.list_persons().data

        matches = [p for p in persons if p.id == created.last_row_id]
        assert len(matches) == 1
        assert matches[0] == Person(id=created.last_row_id, name="A", email="a@x.com", mobile="123")

    def test_list_keeps_insertion_order(self, persons_service):
        for name in ["first", "second", "third"]:
            persons_service.insert_person(Person(name=name, mobile="000"))

        names = [p.name for p in persons_service.list_persons().data]

        assert names == ["first", "second", "third"]

    def test_email_is_optional(self, persons_service):
        created = persons_service.insert_person(Person(name="No Mail", mobile="555"))

        fetched = persons_service.get_person_by_id(created.last_row_id)

        assert fetched.success
        assert fetched.data[0].email is None

    def test_get_unknown_id_is_not_found(self, persons_service):
        result = persons_service.get_person_by_id(424242)

        assert not result.success
        assert result.error_type == ServiceErrorType.RESOURCE_NOT_FOUND

    def test_insert_rejects_null_required_column(self, persons_service):
        # Bypasses model validation to reach the NOT NULL constraint
        result = persons_service.create({"name": None, "email": None, "mobile": "1"})

        assert not result.success
        assert result.error_type == ServiceErrorType.CONSTRAINT_ERROR

    def test_failure_log_omits_column_values(self, persons_service, caplog):
        with caplog.at_level(logging.DEBUG, logger="person_directory"):
            result = persons_service.create({"name": None, "email": "hidden@x.com", "mobile": "5550100"})

        assert result.error_type == ServiceErrorType.CONSTRAINT_ERROR
        assert "INSERT operation failed" in caplog.text
        assert "hidden@x.com" not in caplog.text
        assert "5550100" not in caplog.text

    def test_create_rejects_unknown_column(self, persons_service):
        result = persons_service.create({"name": "A", "mobile": "1", "nickname": "x"})

        assert not result.success
        assert result.error_type == ServiceErrorType.INVALID_ARGUMENT


class TestUpdate:
    """Full overwrite keyed on id"""

    def test_update_without_id_never_reaches_storage(self):
        database = MagicMock(spec=SQLiteDatabase)
        service = PersonsService(database)

        result = service.update_person(Person(name="A", mobile="1"))

        assert not result.success
        assert result.error_type == ServiceErrorType.INVALID_ARGUMENT
        database.connect.assert_not_called()

    def test_update_round_trip(self, persons_service):
        person_id = persons_service.insert_person(Person(name="A", email="a@x.com", mobile="123")).last_row_id
        replacement = Person(id=person_id, name="B", email="b@x.com", mobile="999")

        result = persons_service.update_person(replacement)

        assert result.success
        assert result.count == 1
        assert persons_service.get_person_by_id(person_id).data[0] == replacement

    def test_update_overwrites_email_with_null(self, persons_service):
        person_id = persons_service.insert_person(Person(name="A", email="a@x.com", mobile="123")).last_row_id

        persons_service.update_person(Person(id=person_id, name="A", mobile="123"))

        assert persons_service.get_person_by_id(person_id).data[0].email is None

    def test_update_unknown_id_is_not_found(self, persons_service):
        result = persons_service.update_person(Person(id=999, name="A", mobile="1"))

        assert not result.success
        assert result.error_type == ServiceErrorType.RESOURCE_NOT_FOUND


class TestDelete:
    """Delete keyed on id"""

    def test_delete_then_get_is_not_found(self, persons_service):
        person_id = persons_service.insert_person(Person(name="A", mobile="1")).last_row_id

        result = persons_service.delete_person(person_id)

        assert result.success
        assert result.count == 1
        assert persons_service.get_person_by_id(person_id).error_type == ServiceErrorType.RESOURCE_NOT_FOUND

    def test_delete_unknown_id_succeeds(self, persons_service):
        result = persons_service.delete_person(12345)

        assert result.success
        assert result.count == 0


class TestStorageFailures:
    """SQLite errors surface as DATABASE_ERROR"""

    @pytest.mark.parametrize("call", [
        lambda service: service.list_persons(),
        lambda service: service.get_person_by_id(1),
        lambda service: service.insert_person(Person(name="A", mobile="1")),
        lambda service: service.update_person(Person(id=1, name="A", mobile="1")),
        lambda service: service.delete_person(1),
    ])
    def test_missing_table_is_database_error(self, database, call):
        # Schema deliberately not created
        service = PersonsService(database)

        result = call(service)

        assert not result.success
        assert result.error_type == ServiceErrorType.DATABASE_ERROR


class TestOutOfRangeIds:
    """Ids beyond SQLite's signed 64-bit INTEGER never reach the database"""

    @pytest.mark.parametrize("call", [
        lambda service: service.get_person_by_id(2**63),
        lambda service: service.update_person(Person(id=2**63, name="A", mobile="1")),
        lambda service: service.delete_person(-2**63 - 1),
    ])
    def test_out_of_range_id_is_invalid_argument(self, persons_service, call):
        result = call(persons_service)

        assert not result.success
        assert result.error_type == ServiceErrorType.INVALID_ARGUMENT

    def test_largest_valid_id_is_simply_not_found(self, persons_service):
        result = persons_service.get_person_by_id(2**63 - 1)

        assert result.error_type == ServiceErrorType.RESOURCE_NOT_FOUND
