"""Database status endpoint"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, ProgrammingError
from sqlalchemy.orm import Session

from kanbanify.database import get_db
from kanbanify.models import Board, BoardList, Card
from kanbanify.schemas import DatabaseStats, DatabaseStatus

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/migration", response_model=DatabaseStatus)
async def database_status(db: Session = Depends(get_db)):
    """Report whether the schema exists and how many rows it holds."""
    try:
        stats = DatabaseStats(
            boards=db.query(Board).count(),
            lists=db.query(BoardList).count(),
            cards=db.query(Card).count(),
        )
    except (OperationalError, ProgrammingError) as exc:
        logger.error("Database schema check failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "error": "Database tables not found",
                "details": "The database schema has not been created yet. Run `kanbanify init-db`.",
            },
        )

    return DatabaseStatus(
        success=True,
        message="Database is properly configured and accessible",
        stats=stats,
    )
