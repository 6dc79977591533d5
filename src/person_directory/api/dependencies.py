"""
FastAPI dependencies shared by the API routes
"""

from fastapi import Request

from person_directory.services.persons_service import PersonsService


def get_persons_service(request: Request) -> PersonsService:
    """Return the PersonsService the application was built with"""
    return request.app.state.persons_service
