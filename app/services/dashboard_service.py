from datetime import date, datetime
from typing import Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.appointment import AppointmentStatus
from app.schemas.appointment import (
    CalendarDay, CalendarEvent, DashboardAppointment, TodaysAppointmentsSummary
)
from app.services.appointment_service import AppointmentService
from app.utils.time_utils import (
    END_HOUR, PIXELS_PER_HOUR, START_HOUR, event_geometry, format_time,
    fractional_hour, hour_labels, is_same_day, now_line_position
)


def booking_title(booking) -> str:
    if booking is None:
        return "Appointment"
    if booking.service is not None:
        return booking.service.name
    if booking.package is not None:
        return booking.package.name
    return "Appointment"


def dashboard_entry(appointment) -> DashboardAppointment:
    main_booking = appointment.bookings[0] if appointment.bookings else None
    price = (main_booking.price_paid if main_booking else 0) or appointment.total_price or 0
    stylist = main_booking.employee.name if main_booking and main_booking.employee else None

    return DashboardAppointment(
        id=appointment.id,
        time=appointment.start_time.strftime("%H:%M"),
        service_name=booking_title(main_booking),
        customer_name=appointment.customer.full_name if appointment.customer else None,
        stylist_name=stylist,
        price=round(price, 2),
        status=appointment.status
    )


class DashboardService:
    @staticmethod
    def get_todays_summary(db: Session, location_id: Optional[str] = None, today: Optional[date] = None):
        """Today's next appointments widget"""
        today = today or date.today()
        appointments = AppointmentService.get_appointments_by_date(db, today, location_id)

        return TodaysAppointmentsSummary(
            date=today.isoformat(),
            total=len(appointments),
            booked=sum(1 for a in appointments if a.status == AppointmentStatus.BOOKED),
            confirmed=sum(1 for a in appointments if a.status == AppointmentStatus.CONFIRMED),
            currency_symbol=settings.CURRENCY_SYMBOL,
            appointments=[dashboard_entry(a) for a in appointments]
        )

    @staticmethod
    def get_calendar_day(db: Session, day: date, location_id: Optional[str] = None, now: Optional[datetime] = None):
        """One day of the calendar grid: a column event per booking plus the now line"""
        now = now or datetime.now()
        events = []
        for appointment in AppointmentService.get_appointments_by_date(db, day, location_id):
            if appointment.status == AppointmentStatus.CANCELED:
                continue
            for booking in appointment.bookings:
                start_hour = fractional_hour(booking.start_time or appointment.start_time)
                duration = (booking.duration or 0) / 60
                events.append(CalendarEvent(
                    id=appointment.id,
                    booking_id=booking.id,
                    employee_id=booking.employee_id,
                    title=booking_title(booking),
                    start_hour=start_hour,
                    duration=duration,
                    label=f"{format_time(start_hour)} - {format_time(start_hour + duration)}",
                    **event_geometry(start_hour, duration)
                ))

        return CalendarDay(
            date=day.isoformat(),
            start_hour=START_HOUR,
            end_hour=END_HOUR,
            pixels_per_hour=PIXELS_PER_HOUR,
            hour_labels=[format_time(hour) for hour in hour_labels()],
            now_position=now_line_position(now) if is_same_day(now, day) else None,
            events=events
        )
