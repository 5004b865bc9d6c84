"""Delivery address resolved from a postal code."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import PostalCode


@dataclass(frozen=True)
class Address:
    postal_code: PostalCode
    street: str
    district: str
    city: str
    state: str  # two-letter code, e.g. "SP"

    def __str__(self) -> str:
        parts = [p for p in (self.street, self.district) if p]
        parts.append(f"{self.city}/{self.state}")
        return f"{', '.join(parts)} ({self.postal_code})"
