"""Property filter engine.

A sequential narrowing pass over the given collection followed by an
optional sort. Works on anything shaped like ``app.models.Property``; the
store hands over the whole collection, so there is no index here. If the
listing table grows large, index property_type / listing_type / location in
the database and push the exact-match predicates into the query first.
"""
from typing import Iterable

from app.core.dates import timestamp_key
from app.schemas.property import PropertyFilters


def _matches_text(prop, needle: str) -> bool:
    return (
        needle in (prop.title or "").lower()
        or needle in (prop.description or "").lower()
        or needle in (prop.location or "").lower()
    )


def filter_properties(properties: Iterable, filters: PropertyFilters) -> list:
    result = list(properties)

    if filters.search:
        needle = filters.search.lower()
        result = [p for p in result if _matches_text(p, needle)]

    if filters.location:
        needle = filters.location.lower()
        result = [p for p in result if needle in (p.location or "").lower()]

    if filters.property_type:
        result = [p for p in result if p.property_type == filters.property_type]

    if filters.listing_type:
        result = [p for p in result if p.listing_type == filters.listing_type]

    if filters.min_price is not None:
        result = [p for p in result if p.price >= filters.min_price]

    if filters.max_price is not None:
        result = [p for p in result if p.price <= filters.max_price]

    if filters.min_bedrooms is not None:
        result = [p for p in result if p.bedrooms >= filters.min_bedrooms]

    if filters.max_bedrooms is not None:
        result = [p for p in result if p.bedrooms <= filters.max_bedrooms]

    if filters.min_bathrooms is not None:
        result = [p for p in result if p.bathrooms >= filters.min_bathrooms]

    if filters.features:
        # Every requested feature must be present, not just one of them.
        wanted = set(filters.features)
        result = [p for p in result if wanted.issubset(p.features)]

    return result


def sort_properties(properties: list, sort_by: str | None) -> list:
    """Stable sort; unknown or missing sort_by keeps the input order ("recommended")."""
    if sort_by == "price-low":
        return sorted(properties, key=lambda p: p.price)
    if sort_by == "price-high":
        return sorted(properties, key=lambda p: p.price, reverse=True)
    if sort_by == "newest":
        return sorted(properties, key=lambda p: timestamp_key(p.created_at), reverse=True)
    return list(properties)


def search_properties(properties: Iterable, filters: PropertyFilters | None = None) -> list:
    if filters is None:
        return list(properties)
    return sort_properties(filter_properties(properties, filters), filters.sort_by)
