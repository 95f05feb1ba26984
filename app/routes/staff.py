from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.schemas.staff import (
    EmployeeCreate, EmployeeUpdate, EmployeeResponse, LocationCreate, LocationResponse
)
from app.services.staff_service import StaffService

router = APIRouter()

@router.get("/locations", response_model=List[LocationResponse])
def get_locations(db: Session = Depends(get_db)):
    return StaffService.get_locations(db)

@router.post("/locations", response_model=LocationResponse)
def create_location(location_data: LocationCreate, db: Session = Depends(get_db)):
    return StaffService.create_location(db, location_data)

@router.get("/employees", response_model=List[EmployeeResponse])
def get_employees(location_id: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """Active employees, optionally for one location"""
    return StaffService.get_employees(db, location_id)

@router.post("/employees", response_model=EmployeeResponse)
def create_employee(employee_data: EmployeeCreate, db: Session = Depends(get_db)):
    return StaffService.create_employee(db, employee_data)

@router.put("/employees/{employee_id}", response_model=EmployeeResponse)
def update_employee(employee_id: str, employee_data: EmployeeUpdate, db: Session = Depends(get_db)):
    return StaffService.update_employee(db, employee_id, employee_data)
