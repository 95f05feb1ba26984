from .catalog import router as catalog_router
from .staff import router as staff_router
from .customers import router as customers_router
from .memberships import router as memberships_router
from .coupons import router as coupons_router
from .checkout import router as checkout_router
from .appointments import router as appointments_router
from .dashboard import router as dashboard_router

__all__ = [
    "catalog_router",
    "staff_router",
    "customers_router",
    "memberships_router",
    "coupons_router",
    "checkout_router",
    "appointments_router",
    "dashboard_router"
]
