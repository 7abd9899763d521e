import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from carlog.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/")
def readiness(db: Session = Depends(get_db)):
    """
    Readiness probe for load balancers.

    Answers 200 while the database accepts queries and 503 once it does not.
    The root ``/health`` route is the liveness counterpart and never touches
    the database.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database unreachable: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "success": False,
                "message": "Database unavailable",
                "data": {"status": "unavailable", "database": "offline"},
            },
        )
    return {"success": True, "data": {"status": "ok", "database": "online"}}
