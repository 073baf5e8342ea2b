"""Apply Alembic migrations at startup."""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

from src.config import Settings

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
ALEMBIC_INI = PROJECT_ROOT / "alembic.ini"


def build_alembic_config(settings: Settings) -> Config:
    """Alembic config pointing at this project's scripts and the configured database."""
    config = Config(str(ALEMBIC_INI))
    config.attributes["configure_logger"] = False
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    # ConfigParser treats % as interpolation
    config.set_main_option("sqlalchemy.url", settings.sqlalchemy_url.replace("%", "%%"))
    return config


def run_migrations(settings: Settings) -> bool:
    """Upgrade the schema to head.

    Failures are logged and reported through the return value; startup continues.
    """
    try:
        command.upgrade(build_alembic_config(settings), "head")
    except Exception:
        logger.exception("Failed to apply database migrations")
        return False

    logger.info("Database migrations applied")
    return True
