from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from app.database import get_db
from app.schemas.appointment import TodaysAppointmentsSummary
from app.services.dashboard_service import DashboardService

router = APIRouter()

@router.get("/todays-appointments", response_model=TodaysAppointmentsSummary)
def get_todays_appointments(
    location_id: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """Today's appointments with booked/confirmed counts. location_id=all means every location."""
    if location_id == "all":
        location_id = None
    return DashboardService.get_todays_summary(db, location_id)
