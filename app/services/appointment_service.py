import logging
from datetime import date, datetime, time, timedelta
from typing import Optional

from sqlalchemy.orm import Session, joinedload
from fastapi import HTTPException, status

from app.models.appointment import Appointment, AppointmentStatus, Booking
from app.models.staff import Employee, Location
from app.schemas.appointment import AppointmentCreate, AppointmentReschedule
from app.services.checkout_service import CheckoutService
from app.services.customer_service import CustomerService
from app.utils.validators import sanitize_input
from app.utils.time_utils import parse_time_of_day, snap_to_slot

logger = logging.getLogger(__name__)


def at_hour(day: date, hour: float) -> datetime:
    return datetime.combine(day, time.min) + timedelta(minutes=round(hour * 60))


class AppointmentService:
    @staticmethod
    def _query(db: Session):
        return db.query(Appointment).options(
            joinedload(Appointment.customer),
            joinedload(Appointment.bookings).joinedload(Booking.service),
            joinedload(Appointment.bookings).joinedload(Booking.package),
            joinedload(Appointment.bookings).joinedload(Booking.employee)
        )

    @staticmethod
    def _booking_start(start_time: datetime, slot: str) -> datetime:
        if not slot:
            return start_time
        try:
            return at_hour(start_time.date(), parse_time_of_day(slot))
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid time slot: {slot}"
            )

    @staticmethod
    def _require_employees(db: Session, employee_ids):
        employee_ids = {employee_id for employee_id in employee_ids if employee_id}
        if not employee_ids:
            return
        found = {e.id for e in db.query(Employee.id).filter(Employee.id.in_(employee_ids)).all()}
        missing = employee_ids - found
        if missing:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Employees not found: {', '.join(sorted(missing))}"
            )

    @staticmethod
    def create_appointment(db: Session, appointment_data: AppointmentCreate):
        """Price the selection again and book it"""
        customer = CustomerService.get_customer(db, appointment_data.customer_id)

        if appointment_data.location_id:
            location = db.query(Location).filter(Location.id == appointment_data.location_id).first()
            if not location:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="Location not found"
                )

        quote = CheckoutService.quote(db, appointment_data, on_date=appointment_data.start_time.date())
        if not quote.items:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No services or packages selected"
            )

        AppointmentService._require_employees(db, appointment_data.selected_stylists.values())

        try:
            adjusted_total = sum(item.adjusted_price for item in quote.items)
            share = quote.total / adjusted_total if adjusted_total > 0 else 0

            bookings = []
            for position, item in enumerate(quote.items):
                if item.type == "service":
                    employee_id, slot = item.stylist, item.time
                else:
                    assigned = next((s for s in item.services if s.stylist), None)
                    employee_id = assigned.stylist if assigned else ""
                    slot = next((s.time for s in item.services if s.time), "")

                bookings.append(Booking(
                    service_id=item.id if item.type == "service" else None,
                    package_id=item.id if item.type == "package" else None,
                    employee_id=employee_id or None,
                    start_time=AppointmentService._booking_start(appointment_data.start_time, slot),
                    duration=item.duration,
                    original_price=item.price,
                    price_paid=round(item.adjusted_price * share, 2),
                    position=position
                ))

            appointment = Appointment(
                customer_id=customer.id,
                location_id=appointment_data.location_id,
                start_time=appointment_data.start_time,
                end_time=appointment_data.start_time + timedelta(minutes=quote.total_duration),
                status=AppointmentStatus.BOOKED,
                subtotal=quote.subtotal,
                membership_discount=quote.membership_discount,
                coupon_discount=quote.coupon_discount,
                total_price=quote.total,
                total_duration=quote.total_duration,
                membership_id=quote.membership_id,
                coupon_id=quote.coupon_id,
                notes=sanitize_input(appointment_data.notes),
                bookings=bookings
            )

            db.add(appointment)
            db.commit()
            logger.info("Booked appointment %s for customer %s: %d items, total %.2f",
                        appointment.id, customer.id, len(bookings), quote.total)

            return AppointmentService.get_appointment(db, appointment.id)

        except HTTPException:
            db.rollback()
            raise
        except Exception as e:
            db.rollback()
            logger.error("Error creating appointment: %s", e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error creating appointment: {str(e)}"
            )

    @staticmethod
    def get_appointment(db: Session, appointment_id: str):
        appointment = AppointmentService._query(db).filter(Appointment.id == appointment_id).first()
        if not appointment:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Appointment not found"
            )
        return appointment

    @staticmethod
    def get_appointments_by_date(db: Session, day: date, location_id: Optional[str] = None):
        """Appointments starting on day, earliest first"""
        day_start = datetime.combine(day, time.min)
        query = AppointmentService._query(db).filter(
            Appointment.start_time >= day_start,
            Appointment.start_time < day_start + timedelta(days=1)
        )

        if location_id:
            query = query.filter(Appointment.location_id == location_id)

        return query.order_by(Appointment.start_time).all()

    @staticmethod
    def update_status(db: Session, appointment_id: str, new_status: AppointmentStatus):
        appointment = AppointmentService.get_appointment(db, appointment_id)
        appointment.status = new_status
        db.commit()
        logger.info("Appointment %s is now %s", appointment_id, new_status.value)
        return AppointmentService.get_appointment(db, appointment_id)

    @staticmethod
    def reschedule(db: Session, appointment_id: str, reschedule_data: AppointmentReschedule):
        """Move an appointment, keeping its duration and the spacing of its bookings"""
        appointment = AppointmentService.get_appointment(db, appointment_id)
        duration = appointment.end_time - appointment.start_time

        if reschedule_data.start_time is not None:
            new_start = reschedule_data.start_time
        elif reschedule_data.offset_px is not None:
            hour = snap_to_slot(reschedule_data.offset_px, duration.total_seconds() / 3600)
            new_start = at_hour(appointment.start_time.date(), hour)
        else:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Either start_time or offset_px is required"
            )

        delta = new_start - appointment.start_time
        appointment.start_time = new_start
        appointment.end_time = new_start + duration
        for booking in appointment.bookings:
            if booking.start_time is not None:
                booking.start_time = booking.start_time + delta

        db.commit()
        return AppointmentService.get_appointment(db, appointment_id)
