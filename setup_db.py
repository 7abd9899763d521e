"""
Setup script for creating the CarLog database tables.
Existing tables are left untouched.
"""

import logging
from carlog.db.init_db import init_db

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def setup_database():
    """Create all CarLog tables."""
    logger.info("Creating CarLog database tables...")
    try:
        init_db()
        logger.info("Database tables created successfully!")
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        raise

if __name__ == "__main__":
    setup_database()
