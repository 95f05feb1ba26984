"""Package pricing.

A package is sold below the sum of its services. When individual service
prices move (a membership discount, say) the package keeps the same
percentage off the undiscounted catalog prices, see ``package_adjusted_price``.
"""
from typing import Dict, Iterable, List, Optional


def catalog_index(services: Optional[Iterable]) -> Dict[str, object]:
    return {service.id: service for service in services or []}


def base_constituents(pkg) -> List:
    """Package-service associations whose service is loaded."""
    return [ps for ps in pkg.package_services or [] if ps.service is not None]


def added_service_ids(pkg, customized_service_ids: Optional[Iterable[str]]) -> List[str]:
    """Customization ids not already in the package, first occurrence wins."""
    seen = {ps.service.id for ps in base_constituents(pkg)}
    added = []
    for service_id in customized_service_ids or []:
        if service_id not in seen:
            seen.add(service_id)
            added.append(service_id)
    return added


def constituent_price(ps) -> float:
    return ps.package_selling_price or ps.service.selling_price or 0


def resolve_package_price(pkg, customized_service_ids: Optional[Iterable[str]], services: Optional[Iterable]) -> float:
    """Effective price of ``pkg`` given its customization.

    The stored package price holds unless the package is customizable and the
    customization brings in catalog services outside the base set. The price
    is then the sum over the resulting set: each base constituent at its
    package override price (or its own price), each added service at its
    catalog price. Ids missing from the catalog do not count as added.
    """
    catalog = catalog_index(services)
    added = [
        service_id for service_id in added_service_ids(pkg, customized_service_ids)
        if service_id in catalog
    ] if pkg.is_customizable else []
    if not added:
        return pkg.price or 0

    total = sum(constituent_price(ps) for ps in base_constituents(pkg))
    return total + sum(catalog[service_id].selling_price or 0 for service_id in added)


def package_discount_ratio(package_total_price: float, raw_services_total: float) -> float:
    """Share of the undiscounted price the package charges; 1 when there is nothing to compare against."""
    return package_total_price / raw_services_total if raw_services_total > 0 else 1


def package_adjusted_price(adjusted_prices: Iterable[float], package_total_price: float, raw_services_total: float) -> float:
    """Apply the package's discount ratio to per-service adjusted prices.

    ``raw_services_total`` must be built from catalog selling prices, not
    package override prices, so the package keeps its percentage off the
    original prices while the numerator carries any per-service adjustment.
    """
    ratio = package_discount_ratio(package_total_price, raw_services_total)
    return sum(price * ratio for price in adjusted_prices)
