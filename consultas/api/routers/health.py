# consultas/api/routers/health.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from consultas.data.database import get_db
from consultas.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(status_code=503, detail="Base de datos no disponible")
    return {"status": "ok", "database": "ok"}
