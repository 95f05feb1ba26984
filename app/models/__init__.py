from .common import DiscountType
from .catalog import Category, Service, Package, PackageService
from .staff import Location, Employee
from .customer import Customer
from .membership import Membership, CustomerMembership, ValidityUnit
from .coupon import Coupon
from .appointment import Appointment, Booking, AppointmentStatus

from sqlalchemy.orm import configure_mappers
configure_mappers()

__all__ = [
    "DiscountType",
    "Category", "Service", "Package", "PackageService",
    "Location", "Employee",
    "Customer",
    "Membership", "CustomerMembership", "ValidityUnit",
    "Coupon",
    "Appointment", "Booking", "AppointmentStatus"
]
