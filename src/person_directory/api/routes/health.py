"""
Health check API route
"""

import logging
from fastapi import APIRouter

from person_directory.models.person import StatusResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/check", response_model=StatusResponse)
def health_check():
    """Report that the service is up; does not touch the database"""
    logger.info("Check endpoint handled successfully")
    return {"status": "OK"}
