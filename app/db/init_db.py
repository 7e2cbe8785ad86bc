import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.db.base_class import Base

# import models so SQLAlchemy registers them
from app.models import assignment, submission  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)

    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Pinged %s database, connection OK", engine.url.get_backend_name())
