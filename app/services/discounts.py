"""Coupon and membership discount arithmetic.

Everything here is pure: the callers load memberships, coupons and catalog
rows and pass them in.
"""
from typing import Callable, Dict, Iterable, Optional, Union

from app.models.common import DiscountType


def calculate_discount(kind: Union[DiscountType, str], value: float, subtotal: float) -> float:
    """Discount amount for ``subtotal``.

    A percentage discount takes ``value`` percent of the subtotal; a fixed
    discount is clamped so it never exceeds the subtotal. ``value`` itself is
    not validated.
    """
    kind = DiscountType(kind)
    if kind == DiscountType.PERCENTAGE:
        return subtotal * value / 100
    return min(value, subtotal)


def calculate_coupon_discount(coupon, subtotal: float) -> float:
    if not coupon:
        return 0
    return calculate_discount(coupon.discount_type, coupon.discount_value, subtotal)


def is_coupon_applicable(coupon, service_id: Optional[str] = None, package_id: Optional[str] = None) -> bool:
    if coupon.apply_to_all:
        return True
    if service_id and service_id in (coupon.applicable_services or []):
        return True
    return bool(package_id and package_id in (coupon.applicable_packages or []))


def is_membership_applicable(membership, service_id: Optional[str] = None, package_id: Optional[str] = None) -> bool:
    applicable_services = membership.applicable_services or []
    applicable_packages = membership.applicable_packages or []
    if not applicable_services and not applicable_packages:
        return True
    if service_id and service_id in applicable_services:
        return True
    return bool(package_id and package_id in applicable_packages)


def meets_min_billing(membership, subtotal: float) -> bool:
    return not membership.min_billing_amount or subtotal >= membership.min_billing_amount


def calculate_membership_discount(membership, subtotal: float) -> float:
    """Bill-level membership discount.

    Zero below the membership's minimum billing amount, capped at its maximum
    discount value, and never above the subtotal.
    """
    if not membership or not meets_min_billing(membership, subtotal):
        return 0
    amount = calculate_discount(membership.discount_type, membership.discount_value, subtotal)
    return cap_membership_discount(membership, amount, subtotal)


def cap_membership_discount(membership, amount: float, subtotal: float) -> float:
    if membership.max_discount_value is not None:
        amount = min(amount, membership.max_discount_value)
    return max(0, min(amount, subtotal))


def fixed_membership_percentage(membership, covered_amount: float) -> float:
    """Percentage of ``covered_amount`` a fixed membership takes off.

    A fixed membership discounts the bill once, so it is spread over the
    covered lines by price share instead of being taken off every line.
    """
    if covered_amount <= 0:
        return 0
    return min(membership.discount_value, covered_amount) / covered_amount * 100


def make_service_price_function(
    services: Iterable,
    membership=None,
    packages: Iterable = (),
    percentage: Optional[float] = None,
) -> Callable[[str], float]:
    """Build the ``service_id -> display price`` capability used at checkout.

    A service is discounted when the membership applies to it directly, or
    when it belongs to one of ``packages`` that the membership covers.
    Unknown service ids price at 0.

    ``percentage`` replaces the membership's own rate. Bill-level callers pass
    it for fixed memberships, see ``fixed_membership_percentage``; without it
    a fixed membership is clamped per service.

    Coverage is by service id, so a service that belongs to a covered package
    is discounted wherever it appears in the selection, including as its own
    line.
    """
    prices: Dict[str, float] = {service.id: service.selling_price or 0 for service in services}
    if not membership:
        return lambda service_id: prices.get(service_id, 0)

    covered = set()
    for pkg in packages:
        if is_membership_applicable(membership, package_id=pkg.id):
            covered.update(ps.service.id for ps in pkg.package_services or [] if ps.service is not None)

    def get_service_display_price(service_id: str) -> float:
        price = prices.get(service_id, 0)
        if service_id in covered or is_membership_applicable(membership, service_id=service_id):
            if percentage is not None:
                return price - calculate_discount(DiscountType.PERCENTAGE, percentage, price)
            return price - calculate_discount(membership.discount_type, membership.discount_value, price)
        return price

    return get_service_display_price
