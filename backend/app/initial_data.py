"""Create the users table on a development store when it does not exist yet."""

import logging

from sqlmodel import SQLModel

from app.core.config import settings
from app.core.db import Database
from app.models import User

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def init_schema(database: Database) -> None:
    SQLModel.metadata.create_all(database.engine, tables=[User.__table__])


def main() -> None:
    logger.info("Creating users table")
    database = Database.from_settings(settings)
    try:
        init_schema(database)
    finally:
        database.dispose()
    logger.info("Users table ready")


if __name__ == "__main__":
    main()
