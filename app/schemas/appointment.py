from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime

from app.models.appointment import AppointmentStatus
from app.schemas.checkout import CheckoutSelection
from app.schemas.customer import CustomerResponse

class AppointmentCreate(CheckoutSelection):
    customer_id: str
    location_id: Optional[str] = None
    start_time: datetime
    notes: Optional[str] = None

class AppointmentStatusUpdate(BaseModel):
    status: AppointmentStatus

class AppointmentReschedule(BaseModel):
    start_time: Optional[datetime] = None
    # Drop position on the calendar grid, used when start_time is absent
    offset_px: Optional[float] = Field(None, ge=0)

class NamedRef(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)

class BookingResponse(BaseModel):
    id: str
    service_id: Optional[str] = None
    package_id: Optional[str] = None
    employee_id: Optional[str] = None
    start_time: Optional[datetime] = None
    duration: int
    original_price: float
    price_paid: float
    service: Optional[NamedRef] = None
    package: Optional[NamedRef] = None
    employee: Optional[NamedRef] = None

    model_config = ConfigDict(from_attributes=True)

class AppointmentResponse(BaseModel):
    id: str
    customer_id: str
    location_id: Optional[str] = None
    start_time: datetime
    end_time: datetime
    status: AppointmentStatus
    subtotal: float
    membership_discount: float
    coupon_discount: float
    total_price: float
    total_duration: int
    membership_id: Optional[str] = None
    coupon_id: Optional[str] = None
    notes: Optional[str] = None
    customer: Optional[CustomerResponse] = None
    bookings: List[BookingResponse] = []

    model_config = ConfigDict(from_attributes=True)

class DashboardAppointment(BaseModel):
    id: str
    time: str
    service_name: str
    customer_name: Optional[str] = None
    stylist_name: Optional[str] = None
    price: float
    status: AppointmentStatus

class TodaysAppointmentsSummary(BaseModel):
    date: str
    total: int
    booked: int
    confirmed: int
    currency_symbol: str
    appointments: List[DashboardAppointment]

class CalendarEvent(BaseModel):
    id: str
    booking_id: str
    employee_id: Optional[str] = None
    title: str
    start_hour: float
    duration: float
    label: str
    top: float
    height: float

class CalendarDay(BaseModel):
    date: str
    start_hour: int
    end_hour: int
    pixels_per_hour: int
    hour_labels: List[str]
    now_position: Optional[float] = None
    events: List[CalendarEvent]
