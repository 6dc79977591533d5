"""
Person Directory Backend API Server
Core functionality: CRUD over person records stored in SQLite
"""

import logging
from typing import List, Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from person_directory import __version__
from person_directory.api.routes import health, persons
from person_directory.services.persons_service import PersonsService
from person_directory.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)


def create_app(persons_service: PersonsService, allowed_origins: Optional[List[str]] = None) -> FastAPI:
    """
    Build the FastAPI application around an already initialized PersonsService

    Args:
        persons_service: Storage accessor shared by all requests
        allowed_origins: CORS origins, defaults to allowing any origin
    """
    app = FastAPI(
        title="Person Directory Backend",
        description="Backend API for creating, reading, updating and deleting person records",
        version=__version__
    )
    app.state.persons_service = persons_service

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins or ["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Setup centralized error handling
    setup_error_handling(app)

    # Include API routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(persons.router, tags=["Persons"])

    logger.info("Person Directory Backend application created")
    return app
