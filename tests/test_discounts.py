import pytest

from app.models import DiscountType
from app.services.discounts import (
    calculate_coupon_discount,
    calculate_discount,
    calculate_membership_discount,
    fixed_membership_percentage,
    is_coupon_applicable,
    is_membership_applicable,
    make_service_price_function,
)
from tests.conftest import make_coupon, make_membership


@pytest.mark.parametrize("subtotal", [0, 10, 99.99, 2500])
@pytest.mark.parametrize("value", [0, 15, 100, 5000])
def test_fixed_discount_never_exceeds_subtotal(subtotal, value):
    assert calculate_discount("fixed", value, subtotal) <= subtotal


@pytest.mark.parametrize("subtotal,percent", [(0, 10), (200, 10), (1234.5, 12.5), (80, 100)])
def test_percentage_discount(subtotal, percent):
    assert calculate_discount("percentage", percent, subtotal) == pytest.approx(subtotal * percent / 100)


def test_discount_accepts_enum_members():
    assert calculate_discount(DiscountType.FIXED, 30, 100) == 30
    assert calculate_discount(DiscountType.PERCENTAGE, 50, 100) == 50


def test_unknown_discount_kind_raises():
    with pytest.raises(ValueError):
        calculate_discount("bogo", 10, 100)


def test_coupon_discount():
    assert calculate_coupon_discount(None, 500) == 0
    assert calculate_coupon_discount(make_coupon(discount_value=50.0), 500) == 50
    assert calculate_coupon_discount(make_coupon(discount_value=50.0), 20) == 20
    percent = make_coupon(discount_type=DiscountType.PERCENTAGE, discount_value=10.0)
    assert calculate_coupon_discount(percent, 500) == pytest.approx(50)


def test_coupon_applicability():
    everything = make_coupon()
    assert is_coupon_applicable(everything, service_id="anything")

    limited = make_coupon(apply_to_all=False, applicable_services=["svc-a"], applicable_packages=["pkg-b"])
    assert is_coupon_applicable(limited, service_id="svc-a")
    assert is_coupon_applicable(limited, package_id="pkg-b")
    assert not is_coupon_applicable(limited, service_id="svc-z")


def test_membership_applies_to_all_when_lists_empty():
    membership = make_membership()
    assert is_membership_applicable(membership, service_id="svc-x")
    assert is_membership_applicable(membership, package_id="pkg-x")


def test_membership_explicit_lists():
    membership = make_membership(applicable_services=["svc-a"], applicable_packages=["pkg-b"])
    assert is_membership_applicable(membership, service_id="svc-a")
    assert is_membership_applicable(membership, package_id="pkg-b")
    assert not is_membership_applicable(membership, service_id="svc-b")


def test_membership_discount_respects_min_billing():
    membership = make_membership(min_billing_amount=1000.0)
    assert calculate_membership_discount(membership, 999) == 0
    assert calculate_membership_discount(membership, 1000) == pytest.approx(100)


def test_membership_discount_capped():
    membership = make_membership(discount_value=50.0, max_discount_value=200.0)
    assert calculate_membership_discount(membership, 1000) == 200
    assert calculate_membership_discount(membership, 300) == pytest.approx(150)


def test_fixed_membership_discount_clamped_to_subtotal():
    membership = make_membership(discount_type=DiscountType.FIXED, discount_value=500.0)
    assert calculate_membership_discount(membership, 120) == 120


def test_fixed_membership_as_percentage_of_covered_amount():
    membership = make_membership(discount_type=DiscountType.FIXED, discount_value=100.0)
    assert fixed_membership_percentage(membership, 400) == pytest.approx(25)
    assert fixed_membership_percentage(membership, 50) == 100
    assert fixed_membership_percentage(membership, 0) == 0


def test_price_function_percentage_override(services):
    membership = make_membership(discount_type=DiscountType.FIXED, discount_value=100.0)
    price_of = make_service_price_function(services, membership, percentage=20)
    assert price_of("svc-haircut") == pytest.approx(400)
    assert price_of("svc-manicure") == pytest.approx(240)


def test_price_function_without_membership_is_catalog_price(services):
    price_of = make_service_price_function(services)
    assert price_of("svc-haircut") == 500
    assert price_of("svc-missing") == 0


def test_price_function_applies_membership(services):
    price_of = make_service_price_function(services, make_membership())
    assert price_of("svc-haircut") == pytest.approx(450)
    assert price_of("svc-manicure") == pytest.approx(270)


def test_price_function_covers_services_of_applicable_packages(services, glow_package):
    membership = make_membership(applicable_packages=["pkg-glow"])
    price_of = make_service_price_function(services, membership, [glow_package])
    assert price_of("svc-facial") == pytest.approx(900)
    assert price_of("svc-manicure") == 300
