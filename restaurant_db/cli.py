# restaurant_db/cli.py
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from .config import DEV_DATABASE_URL, ConfigError, Settings, safe_url
from .schema import bootstrap

logger = logging.getLogger("restaurant_db")

EXIT_OK = 0
EXIT_DB_ERROR = 1
EXIT_CONFIG_ERROR = 2


def main() -> int:
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("Configuration error: %s", e)
        return EXIT_CONFIG_ERROR

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.is_development and settings.database_url == DEV_DATABASE_URL:
        logger.warning("DATABASE_URL not set; using development default %s", safe_url(DEV_DATABASE_URL))

    try:
        database = bootstrap(settings)
    except SQLAlchemyError:
        # already logged with traceback by initialize()
        return EXIT_DB_ERROR

    database.dispose()
    logger.info("Database ready")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
