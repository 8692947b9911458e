"""Property search: conjunctive filters, optional ordering and featured sampling.

Every filter is optional and applied as its own narrowing pass over the
collection, so the result is the same regardless of the order of the passes.
"""
import math
import random
from typing import Iterable, List, Optional, Tuple

from structlog import get_logger

from aldar.models import Property
from aldar.schemas.search import PropertySearch, SortByEnum

logger = get_logger()


def _parse_bound(part: str) -> Optional[float]:
    part = part.strip()
    if not part:
        return None
    try:
        value = float(part)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_price_range(price_range: Optional[str]) -> Tuple[Optional[float], Optional[float]]:
    """Turn a price range string into ``(min_price, max_price)``.

    Accepted shapes are ``"<min>-<max>"``, ``"<min>-"``, ``"-<max>"`` and
    ``"<min>+"``. A side that is not a number is treated as absent, so a
    malformed string yields ``(None, None)`` and filters nothing.
    """
    if not price_range:
        return None, None
    raw = price_range.strip().replace(",", "")
    if raw.endswith("+"):
        return _parse_bound(raw[:-1]), None
    left, _, right = raw.partition("-")
    return _parse_bound(left), _parse_bound(right)


def sort_properties(properties: List[Property], sort_by: SortByEnum) -> List[Property]:
    if sort_by == SortByEnum.price_low_to_high:
        return sorted(properties, key=lambda p: p.price)
    if sort_by == SortByEnum.price_high_to_low:
        return sorted(properties, key=lambda p: p.price, reverse=True)
    if sort_by == SortByEnum.area_high_to_low:
        return sorted(properties, key=lambda p: p.area, reverse=True)
    # newest first; ids break ties between records created in the same instant
    return sorted(properties, key=lambda p: (p.created_at, p.id), reverse=True)


def search_properties(properties: Iterable[Property], search: PropertySearch) -> List[Property]:
    results = list(properties)
    total = len(results)

    if search.city:
        results = [p for p in results if p.city == search.city]

    if search.type is not None:
        results = [p for p in results if p.type == search.type]

    if search.is_rental is not None:
        results = [p for p in results if p.is_rental == search.is_rental]

    min_price, max_price = parse_price_range(search.price_range)
    if min_price is not None:
        results = [p for p in results if p.price >= min_price]
    if max_price is not None:
        results = [p for p in results if p.price <= max_price]

    if search.bedrooms is not None:
        # unknown bedroom count never satisfies a bedrooms filter
        results = [p for p in results if p.bedrooms is not None and p.bedrooms >= search.bedrooms]

    if search.area is not None:
        results = [p for p in results if p.area >= search.area]

    if search.sort_by is not None:
        results = sort_properties(results, search.sort_by)

    logger.debug("Property search evaluated", total=total, matched=len(results))
    return results


def select_featured(properties: Iterable[Property], limit: int, rng: random.Random) -> List[Property]:
    pool = list(properties)
    rng.shuffle(pool)
    return pool[:max(limit, 0)]
