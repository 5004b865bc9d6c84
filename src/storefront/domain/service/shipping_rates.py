"""Domain service: flat shipping rates per destination state."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from storefront.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Default rates
# ---------------------------------------------------------------------------
DEFAULT_RATES: dict[str, Money] = {
    "SP": Money(Decimal("10.00")),
    "RJ": Money(Decimal("15.00")),
    "MG": Money(Decimal("20.00")),
}
DEFAULT_FALLBACK = Money(Decimal("30.00"))


class ShippingRateTable:

    def __init__(
        self,
        rates: Mapping[str, Money] | None = None,
        fallback: Money = DEFAULT_FALLBACK,
    ) -> None:
        source = DEFAULT_RATES if rates is None else rates
        self._rates = {state.upper(): rate for state, rate in source.items()}
        self._fallback = fallback

    def rate_for(self, state: str) -> Money:
        """Shipping cost to *state*; unlisted states pay the fallback rate."""
        return self._rates.get(state.strip().upper(), self._fallback)
