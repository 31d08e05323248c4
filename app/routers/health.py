# app/routers/health.py
"""
System health check endpoint.
Returns status of backend + DB + a snapshot of fleet availability.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import func, text
from app.database import get_db
from app.models.cab import Cab
from datetime import datetime

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(db: Session = Depends(get_db)):
    """
    Returns:
    - Backend status
    - Database connectivity
    - Cab count per status
    """
    result = {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "backend": "ok",
        "database": "unknown",
        "cabs": {},
    }

    try:
        db.execute(text("SELECT 1"))
        result["database"] = "ok"
        rows = db.query(Cab.status, func.count(Cab.id)).group_by(Cab.status).all()
        result["cabs"] = {cab_status: count for cab_status, count in rows}
    except Exception as e:
        result["database"] = f"error: {str(e)}"
        result["status"] = "degraded"

    return result
