"""
Person-related Pydantic models
"""

from typing import Optional
from pydantic import BaseModel, Field


class Person(BaseModel):
    """A row of the persons table. ``id`` is None until the database assigns one."""
    id: Optional[int] = None
    name: str
    email: Optional[str] = None
    mobile: str

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


class PersonCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: Optional[str] = None
    mobile: str = Field(..., min_length=1)


class PersonUpdateRequest(BaseModel):
    """Full replacement of a person; an omitted email clears the stored one"""
    id: Optional[int] = Field(None, description="Must match the id query parameter when given")
    name: str = Field(..., min_length=1)
    email: Optional[str] = None
    mobile: str = Field(..., min_length=1)


class MessageResponse(BaseModel):
    message: str


class StatusResponse(BaseModel):
    status: str
