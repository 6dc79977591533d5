"""
Person management API routes
Each handler validates its input and delegates to exactly one PersonsService call.
"""

import logging
from typing import Annotated, List
from fastapi import APIRouter, HTTPException, Depends, Query

from person_directory.api.dependencies import get_persons_service
from person_directory.models.enums import ServiceErrorType
from person_directory.models.person import (
    Person,
    PersonCreateRequest,
    PersonUpdateRequest,
    MessageResponse,
)
from person_directory.services.base_service import ServiceResult
from person_directory.services.persons_service import PersonsService

router = APIRouter()
logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value
SQLITE_INTEGER_MIN = -2**63
SQLITE_INTEGER_MAX = 2**63 - 1

PersonIdQuery = Annotated[
    int,
    Query(alias="id", ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX, description="ID of the person"),
]


def _raise_for_failure(result: ServiceResult, operation: str) -> None:
    """Translate a failed ServiceResult into an HTTPException"""
    if result.error_type == ServiceErrorType.RESOURCE_NOT_FOUND:
        raise HTTPException(status_code=404, detail="Person not found")
    if result.error_type == ServiceErrorType.INVALID_ARGUMENT:
        raise HTTPException(status_code=400, detail=result.error)

    # Storage details stay in the server log
    logger.error(f"Failed to {operation}: {result.error}")
    raise HTTPException(status_code=500, detail="Internal Server Error")


@router.get("/list-persons", response_model=List[Person])
def list_persons(service: PersonsService = Depends(get_persons_service)):
    """List all persons"""
    result = service.list_persons()
    if not result.success:
        _raise_for_failure(result, "list persons")
    return result.data


@router.get("/get-person", response_model=Person)
def get_person(
    person_id: PersonIdQuery,
    service: PersonsService = Depends(get_persons_service)
):
    """Get a single person by ID"""
    result = service.get_person_by_id(person_id)
    if not result.success:
        _raise_for_failure(result, f"get person {person_id}")
    return result.data[0]


@router.post("/create-person", response_model=MessageResponse)
def create_person(
    request: PersonCreateRequest,
    service: PersonsService = Depends(get_persons_service)
):
    """Create a new person; the ID is assigned by the database"""
    result = service.insert_person(Person(**request.model_dump()))
    if not result.success:
        _raise_for_failure(result, "create person")
    return {"message": "Person created successfully"}


@router.post("/update-person", response_model=MessageResponse)
def update_person(
    request: PersonUpdateRequest,
    person_id: PersonIdQuery,
    service: PersonsService = Depends(get_persons_service)
):
    """
    Overwrite all fields of a person

    The query parameter identifies the row. An id in the body is optional
    and, when given, must name the same person.
    """
    if request.id is not None and request.id != person_id:
        raise HTTPException(
            status_code=400,
            detail="Person ID in body does not match the id query parameter"
        )

    logger.debug(f"Updated person data for ID {person_id}: name={request.name!r}")
    person = Person(id=person_id, name=request.name, email=request.email, mobile=request.mobile)
    result = service.update_person(person)
    if not result.success:
        _raise_for_failure(result, f"update person {person_id}")
    return {"message": "Person updated successfully"}


@router.post("/delete-person", response_model=MessageResponse)
def delete_person(
    person_id: PersonIdQuery,
    service: PersonsService = Depends(get_persons_service)
):
    """Delete a person by ID; unknown IDs are not an error"""
    result = service.delete_person(person_id)
    if not result.success:
        _raise_for_failure(result, f"delete person {person_id}")
    return {"message": "Person deleted successfully"}
