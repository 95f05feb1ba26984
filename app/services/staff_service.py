from typing import Callable, Optional

from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from app.models.staff import Employee, Location
from app.schemas.staff import EmployeeCreate, EmployeeUpdate, LocationCreate

class StaffService:
    @staticmethod
    def create_location(db: Session, location_data: LocationCreate):
        location = Location(**location_data.model_dump())
        db.add(location)
        db.commit()
        db.refresh(location)
        return location

    @staticmethod
    def get_locations(db: Session):
        return db.query(Location).filter(Location.is_active == True).order_by(Location.name).all()

    @staticmethod
    def create_employee(db: Session, employee_data: EmployeeCreate):
        if employee_data.location_id:
            StaffService._require_location(db, employee_data.location_id)

        employee = Employee(**employee_data.model_dump())
        db.add(employee)
        db.commit()
        db.refresh(employee)
        return employee

    @staticmethod
    def get_employees(db: Session, location_id: Optional[str] = None):
        query = db.query(Employee).filter(Employee.is_active == True)
        if location_id:
            query = query.filter(Employee.location_id == location_id)
        return query.order_by(Employee.name).all()

    @staticmethod
    def update_employee(db: Session, employee_id: str, employee_data: EmployeeUpdate):
        employee = db.query(Employee).filter(Employee.id == employee_id).first()
        if not employee:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Employee not found"
            )

        update_data = employee_data.model_dump(exclude_unset=True)
        if update_data.get("location_id"):
            StaffService._require_location(db, update_data["location_id"])

        for field, value in update_data.items():
            setattr(employee, field, value)

        db.commit()
        db.refresh(employee)
        return employee

    @staticmethod
    def stylist_name_lookup(db: Session) -> Callable[[str], Optional[str]]:
        """id -> display name, None for unknown ids"""
        names = {employee.id: employee.name for employee in db.query(Employee).all()}
        return names.get

    @staticmethod
    def _require_location(db: Session, location_id: str):
        location = db.query(Location).filter(Location.id == location_id).first()
        if not location:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Location not found"
            )
        return location
