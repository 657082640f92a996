import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.db import Database

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def init(database: Database) -> None:
    database.ping()


def main() -> int:
    logger.info("Checking store connectivity")
    database = Database.from_settings(settings)
    try:
        init(database)
    except SQLAlchemyError as e:
        logger.error("Store is unreachable: %s", e)
        return 1
    finally:
        database.dispose()
    logger.info("Store is reachable")
    return 0


if __name__ == "__main__":
    sys.exit(main())
