from sqlalchemy import Column, Integer, String, DateTime, Text, Float, ForeignKey, Enum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum
from app.database import Base
from app.models.common import generate_id

class AppointmentStatus(str, enum.Enum):
    BOOKED = "booked"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELED = "canceled"

class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(String(36), primary_key=True, default=generate_id)
    customer_id = Column(String(36), ForeignKey("customers.id"), nullable=False)
    location_id = Column(String(36), ForeignKey("locations.id"))
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime, nullable=False)
    status = Column(Enum(AppointmentStatus), default=AppointmentStatus.BOOKED)
    subtotal = Column(Float, nullable=False, default=0.0)
    membership_discount = Column(Float, default=0.0)
    coupon_discount = Column(Float, default=0.0)
    total_price = Column(Float, nullable=False, default=0.0)
    total_duration = Column(Integer, default=0)
    membership_id = Column(String(36), ForeignKey("memberships.id"))
    coupon_id = Column(String(36), ForeignKey("coupons.id"))
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    customer = relationship("Customer", back_populates="appointments")
    location = relationship("Location", back_populates="appointments")
    membership = relationship("Membership")
    coupon = relationship("Coupon")
    bookings = relationship(
        "Booking",
        back_populates="appointment",
        order_by="Booking.position",
        cascade="all, delete-orphan"
    )

class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=generate_id)
    appointment_id = Column(String(36), ForeignKey("appointments.id"), nullable=False)
    service_id = Column(String(36), ForeignKey("services.id"))
    package_id = Column(String(36), ForeignKey("packages.id"))
    employee_id = Column(String(36), ForeignKey("employees.id"))
    start_time = Column(DateTime)
    duration = Column(Integer, default=0)
    original_price = Column(Float, nullable=False, default=0.0)
    price_paid = Column(Float, nullable=False, default=0.0)
    position = Column(Integer, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    appointment = relationship("Appointment", back_populates="bookings")
    service = relationship("Service")
    package = relationship("Package")
    employee = relationship("Employee", back_populates="bookings")
