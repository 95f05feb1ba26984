from sqlalchemy import Column, String, Boolean, DateTime, Text, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.common import generate_id

class Location(Base):
    __tablename__ = "locations"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    address = Column(Text)
    phone_number = Column(String(20))
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    employees = relationship("Employee", back_populates="location")
    appointments = relationship("Appointment", back_populates="location")

class Employee(Base):
    __tablename__ = "employees"

    id = Column(String(36), primary_key=True, default=generate_id)
    location_id = Column(String(36), ForeignKey("locations.id"))
    name = Column(String(255), nullable=False)
    email = Column(String(255))
    phone_number = Column(String(20))
    role = Column(String(100), default="stylist")
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    location = relationship("Location", back_populates="employees")
    bookings = relationship("Booking", back_populates="employee")

    @property
    def avatar(self):
        return "".join(part[0] for part in (self.name or "").split(" ") if part)
