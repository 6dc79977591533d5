"""
Configuration settings for the Person Directory Backend
"""

import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# Database configuration
DATABASE_PATH = os.getenv("DATABASE_PATH", "myDataBase.db")
DATABASE_TIMEOUT = float(os.getenv("DATABASE_TIMEOUT", 5))

# Server configuration
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8081))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]

# Validate required environment variables
if not DATABASE_PATH:
    raise ValueError("DATABASE_PATH environment variable must not be empty")

logger.debug(f"Database path: {DATABASE_PATH}, default port: {PORT}")
