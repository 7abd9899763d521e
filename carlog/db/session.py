from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from carlog.core.config import settings

db_url = settings.DATABASE_URL

engine_kwargs = {"pool_pre_ping": True}  # Test connections for liveness when checked out from pool
if db_url.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    # An in-memory database lives inside one connection, so every session must share it
    if db_url in ("sqlite://", "sqlite:///:memory:"):
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(db_url, **engine_kwargs)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for declarative class definitions
Base = declarative_base()

# Dependency to get database session
def get_db():
    """
    Dependency for FastAPI endpoints that need a database session.
    Creates a new session for each request and closes it when done.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
