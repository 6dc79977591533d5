"""
Process bootstrap: configuration, schema setup and the uvicorn server
"""

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn
from fastapi import FastAPI

from person_directory.app import create_app
from person_directory.config.settings import (
    ALLOWED_ORIGINS,
    DATABASE_PATH,
    DATABASE_TIMEOUT,
    HOST,
    LOG_LEVEL,
    PORT,
)
from person_directory.database.connection import SQLiteDatabase
from person_directory.services.persons_service import PersonsService

logger = logging.getLogger(__name__)

SERVE_MODE = "serve"


class StartupError(RuntimeError):
    """Raised when the service cannot be prepared for serving"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Person Directory Backend")
    parser.add_argument("mode", nargs="?", choices=[SERVE_MODE], help="Launch mode")
    parser.add_argument("port", nargs="?", type=int, help="Port to listen on (requires 'serve')")
    return parser.parse_args(argv)


def resolve_port(args: argparse.Namespace, default_port: int = PORT) -> int:
    """An explicit port is honored only in serve mode"""
    if args.mode == SERVE_MODE and args.port is not None:
        return args.port
    return default_port


def build_app(database_path: str = DATABASE_PATH, timeout: float = DATABASE_TIMEOUT) -> FastAPI:
    """Open the database, ensure the persons table exists and build the app"""
    database = SQLiteDatabase(database_path, timeout=timeout)
    persons_service = PersonsService(database)

    result = persons_service.ensure_schema()
    if not result.success:
        raise StartupError(result.error)

    return create_app(persons_service, allowed_origins=ALLOWED_ORIGINS)


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=LOG_LEVEL)
    args = parse_args(argv)

    try:
        app = build_app()
    except StartupError as e:
        logger.critical(f"Error creating 'persons' table: {e}")
        sys.exit(1)

    port = resolve_port(args)
    logger.info(f"Starting Person Directory Backend on port {port}")
    uvicorn.run(app, host=HOST, port=port)


if __name__ == "__main__":
    main()
