from .catalog import ServiceCreate, ServiceResponse, PackageCreate, PackageResponse, CategoryResponse
from .staff import EmployeeCreate, EmployeeResponse, LocationResponse
from .customer import CustomerCreate, CustomerResponse
from .membership import MembershipCreate, MembershipResponse
from .coupon import CouponCreate, CouponResponse
from .checkout import CheckoutSelection, CheckoutQuote, ServiceCheckoutItem, PackageCheckoutItem, PackageServiceItem
from .appointment import AppointmentCreate, AppointmentResponse, TodaysAppointmentsSummary, CalendarDay

__all__ = [
    "ServiceCreate", "ServiceResponse", "PackageCreate", "PackageResponse", "CategoryResponse",
    "EmployeeCreate", "EmployeeResponse", "LocationResponse",
    "CustomerCreate", "CustomerResponse",
    "MembershipCreate", "MembershipResponse",
    "CouponCreate", "CouponResponse",
    "CheckoutSelection", "CheckoutQuote", "ServiceCheckoutItem", "PackageCheckoutItem", "PackageServiceItem",
    "AppointmentCreate", "AppointmentResponse", "TodaysAppointmentsSummary", "CalendarDay"
]
