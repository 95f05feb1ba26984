from .catalog_service import CatalogService
from .staff_service import StaffService
from .customer_service import CustomerService
from .membership_service import MembershipService
from .coupon_service import CouponService
from .checkout_service import CheckoutService, build_checkout_items
from .appointment_service import AppointmentService
from .dashboard_service import DashboardService

__all__ = [
    "CatalogService",
    "StaffService",
    "CustomerService",
    "MembershipService",
    "CouponService",
    "CheckoutService",
    "build_checkout_items",
    "AppointmentService",
    "DashboardService"
]
