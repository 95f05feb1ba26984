from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date

from app.database import get_db
from app.schemas.appointment import (
    AppointmentCreate, AppointmentResponse, AppointmentStatusUpdate, AppointmentReschedule, CalendarDay
)
from app.services.appointment_service import AppointmentService
from app.services.dashboard_service import DashboardService

router = APIRouter()

@router.get("/", response_model=List[AppointmentResponse])
def get_appointments(
    day: date = Query(..., alias="date"),
    location_id: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """Appointments starting on a date, earliest first"""
    return AppointmentService.get_appointments_by_date(db, day, location_id)

@router.post("/", response_model=AppointmentResponse)
def create_appointment(appointment_data: AppointmentCreate, db: Session = Depends(get_db)):
    """Book the selected services and packages"""
    return AppointmentService.create_appointment(db, appointment_data)

@router.get("/calendar", response_model=CalendarDay)
def get_calendar_day(
    day: date = Query(..., alias="date"),
    location_id: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    return DashboardService.get_calendar_day(db, day, location_id)

@router.get("/{appointment_id}", response_model=AppointmentResponse)
def get_appointment(appointment_id: str, db: Session = Depends(get_db)):
    return AppointmentService.get_appointment(db, appointment_id)

@router.put("/{appointment_id}/status", response_model=AppointmentResponse)
def update_appointment_status(
    appointment_id: str,
    status_data: AppointmentStatusUpdate,
    db: Session = Depends(get_db)
):
    return AppointmentService.update_status(db, appointment_id, status_data.status)

@router.put("/{appointment_id}/reschedule", response_model=AppointmentResponse)
def reschedule_appointment(
    appointment_id: str,
    reschedule_data: AppointmentReschedule,
    db: Session = Depends(get_db)
):
    """Move an appointment to a new start time or a calendar drop position"""
    return AppointmentService.reschedule(db, appointment_id, reschedule_data)
