import logging
from datetime import date
from typing import Callable, Dict, Iterable, List, Optional

from sqlalchemy.orm import Session, joinedload
from fastapi import HTTPException, status

from app.core.config import settings
from app.models.catalog import Service, Package, PackageService
from app.models.common import DiscountType
from app.models.membership import Membership
from app.schemas.checkout import (
    CheckoutQuote, CheckoutSelection, PackageCheckoutItem, PackageServiceItem, ServiceCheckoutItem
)
from app.services.coupon_service import CouponService
from app.services.membership_service import MembershipService
from app.services.staff_service import StaffService
from app.services.discounts import (
    calculate_coupon_discount, cap_membership_discount, fixed_membership_percentage,
    is_coupon_applicable, make_service_price_function, meets_min_billing
)
from app.services.package_pricing import (
    added_service_ids, base_constituents, catalog_index, constituent_price,
    package_adjusted_price, resolve_package_price
)
from app.utils.time_utils import format_duration as default_format_duration

logger = logging.getLogger(__name__)


def build_checkout_items(
    selected_services: Iterable[str],
    selected_packages: Iterable[str],
    services: Optional[Iterable],
    packages: Optional[Iterable],
    selected_stylists: Optional[Dict[str, str]] = None,
    selected_time_slots: Optional[Dict[str, str]] = None,
    customized_services: Optional[Dict[str, List[str]]] = None,
    get_service_display_price: Optional[Callable[[str], float]] = None,
    get_stylist_name: Optional[Callable[[str], Optional[str]]] = None,
    format_duration: Callable[[int], str] = default_format_duration,
) -> list:
    """Turn the current selection into display-ready checkout items.

    Services come first, then packages, each in selection order. Ids with no
    catalog entry are dropped rather than reported, since the catalog may
    still be loading when the selection is first priced.
    """
    services = list(services or [])
    selected_stylists = selected_stylists or {}
    selected_time_slots = selected_time_slots or {}
    customized_services = customized_services or {}
    catalog = catalog_index(services)
    package_catalog = {pkg.id: pkg for pkg in packages or []}
    price_of = get_service_display_price or make_service_price_function(services)
    stylist_name_of = get_stylist_name or (lambda stylist_id: None)

    def assignment(service_id):
        stylist = selected_stylists.get(service_id) or ""
        return {
            "stylist": stylist,
            "stylist_name": stylist_name_of(stylist) if stylist else "",
            "time": selected_time_slots.get(service_id) or "",
        }

    def service_item(service_id):
        service = catalog.get(service_id)
        if service is None:
            logger.debug("Dropping unknown service %s from checkout", service_id)
            return None

        return ServiceCheckoutItem(
            id=service_id,
            name=service.name,
            price=service.selling_price or 0,
            adjusted_price=price_of(service_id),
            duration=service.duration or 0,
            formatted_duration=format_duration(service.duration or 0),
            **assignment(service_id)
        )

    def package_item(package_id):
        pkg = package_catalog.get(package_id)
        if pkg is None:
            logger.debug("Dropping unknown package %s from checkout", package_id)
            return None

        constituents = [
            PackageServiceItem(
                id=ps.service.id,
                name=ps.service.name,
                price=constituent_price(ps),
                adjusted_price=price_of(ps.service.id),
                duration=ps.service.duration or 0,
                is_customized=False,
                **assignment(ps.service.id)
            )
            for ps in base_constituents(pkg)
        ]

        customization = customized_services.get(package_id) or []
        if pkg.is_customizable:
            for service_id in added_service_ids(pkg, customization):
                service = catalog.get(service_id)
                if service is None:
                    continue
                constituents.append(PackageServiceItem(
                    id=service.id,
                    name=service.name,
                    price=service.selling_price or 0,
                    adjusted_price=price_of(service.id),
                    duration=service.duration or 0,
                    is_customized=True,
                    **assignment(service.id)
                ))

        total_duration = sum(s.duration for s in constituents)
        package_total_price = resolve_package_price(pkg, customization, services)

        # Undiscounted baseline: catalog prices, not package override prices
        raw_services_total = sum(
            (catalog[s.id].selling_price or 0) if s.id in catalog else 0
            for s in constituents
        )

        return PackageCheckoutItem(
            id=package_id,
            name=pkg.name,
            price=package_total_price,
            adjusted_price=package_adjusted_price(
                [s.adjusted_price for s in constituents], package_total_price, raw_services_total
            ),
            duration=total_duration,
            formatted_duration=format_duration(total_duration),
            services=constituents
        )

    items = [service_item(service_id) for service_id in selected_services or []]
    items += [package_item(package_id) for package_id in selected_packages or []]
    return [item for item in items if item is not None]


class CheckoutService:
    @staticmethod
    def summarize(
        selection: CheckoutSelection,
        services: List,
        packages: List,
        membership=None,
        coupon=None,
        get_stylist_name: Optional[Callable[[str], Optional[str]]] = None,
    ) -> CheckoutQuote:
        """Price a selection: line items plus membership and coupon totals"""
        def build(price_function):
            return build_checkout_items(
                selection.selected_services,
                selection.selected_packages,
                services,
                packages,
                selected_stylists=selection.selected_stylists,
                selected_time_slots=selection.selected_time_slots,
                customized_services=selection.customized_services,
                get_service_display_price=price_function,
                get_stylist_name=get_stylist_name,
            )

        items = build(make_service_price_function(services))
        subtotal = sum(item.price for item in items)

        membership_discount = 0
        if membership and meets_min_billing(membership, subtotal):
            selected = set(selection.selected_packages)
            selected_packages = [pkg for pkg in packages if pkg.id in selected]
            percentage = None
            if DiscountType(membership.discount_type) == DiscountType.FIXED:
                # The part of the subtotal the membership covers, priced at 100% off
                fully_covered = build(make_service_price_function(
                    services, membership, selected_packages, percentage=100
                ))
                covered_amount = subtotal - sum(item.adjusted_price for item in fully_covered)
                percentage = fixed_membership_percentage(membership, covered_amount)

            items = build(make_service_price_function(
                services, membership, selected_packages, percentage=percentage
            ))
            adjusted_total = sum(item.adjusted_price for item in items)
            membership_discount = cap_membership_discount(membership, subtotal - adjusted_total, subtotal)
        else:
            membership = None

        after_membership = subtotal - membership_discount

        coupon_discount = 0
        if coupon:
            if coupon.apply_to_all:
                coupon_base = after_membership
            else:
                coupon_base = sum(
                    item.adjusted_price for item in items
                    if is_coupon_applicable(
                        coupon,
                        service_id=item.id if item.type == "service" else None,
                        package_id=item.id if item.type == "package" else None
                    )
                )
            coupon_discount = min(calculate_coupon_discount(coupon, min(coupon_base, after_membership)), after_membership)

        total_duration = sum(item.duration for item in items)

        return CheckoutQuote(
            items=items,
            subtotal=round(subtotal, 2),
            membership_discount=round(membership_discount, 2),
            coupon_discount=round(coupon_discount, 2),
            total=round(after_membership - coupon_discount, 2),
            total_duration=total_duration,
            formatted_duration=default_format_duration(total_duration),
            currency=settings.CURRENCY,
            membership_id=membership.id if membership else None,
            coupon_id=coupon.id if coupon else None
        )

    @staticmethod
    def load_catalog(db: Session, selection: CheckoutSelection):
        """Services and the selected packages, with package constituents loaded"""
        services = db.query(Service).all()
        packages = []
        if selection.selected_packages:
            packages = db.query(Package).options(
                joinedload(Package.package_services).joinedload(PackageService.service)
            ).filter(
                Package.id.in_(selection.selected_packages),
                Package.is_active == True
            ).all()
        return services, packages

    @staticmethod
    def resolve_membership(db: Session, selection: CheckoutSelection, on_date: Optional[date] = None):
        if selection.membership_id:
            membership = db.query(Membership).filter(Membership.id == selection.membership_id).first()
            if not membership:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="Membership not found"
                )
            return membership

        if selection.customer_id:
            return MembershipService.get_active_membership(db, selection.customer_id, on_date or date.today())
        return None

    @staticmethod
    def resolve_coupon(db: Session, selection: CheckoutSelection):
        if not selection.coupon_code:
            return None

        coupon = CouponService.validate_coupon_code(db, selection.coupon_code)
        if not coupon:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid or inactive coupon code"
            )
        return coupon

    @staticmethod
    def quote(db: Session, selection: CheckoutSelection, on_date: Optional[date] = None) -> CheckoutQuote:
        """Load everything a selection refers to and price it"""
        services, packages = CheckoutService.load_catalog(db, selection)
        membership = CheckoutService.resolve_membership(db, selection, on_date)
        coupon = CheckoutService.resolve_coupon(db, selection)

        return CheckoutService.summarize(
            selection,
            services,
            packages,
            membership=membership,
            coupon=coupon,
            get_stylist_name=StaffService.stylist_name_lookup(db)
        )
