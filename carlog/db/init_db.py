import logging
from sqlalchemy.exc import SQLAlchemyError

from carlog.db.session import Base, engine
# Register every model on Base.metadata before creating tables
import carlog.models  # noqa: F401

logger = logging.getLogger(__name__)

def init_db():
    """
    Initialize the database by creating all CarLog tables.
    Existing tables are left untouched.
    """
    try:
        Base.metadata.create_all(bind=engine)
        for table in Base.metadata.sorted_tables:
            logger.info(f"Table {table.name} ready")
        logger.info("Database tables created successfully")
    except SQLAlchemyError as e:
        logger.error(f"Error creating database tables: {e}")
        raise
