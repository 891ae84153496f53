"""Initialize database tables."""
import logging
from hotel_api.db.session import engine
from hotel_api.db.models import Base

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized: %s", ", ".join(Base.metadata.tables))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
