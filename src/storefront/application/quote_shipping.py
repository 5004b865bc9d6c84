"""Application service: Quote Shipping use case.

Takes a cart snapshot, resolves the delivery address from a postal
code and prices shipping by destination state. The snapshot is only
read, so a quote can be taken before the cart is drained.
"""

from __future__ import annotations

from storefront.application.dto import CheckoutSnapshot, ShippingQuote
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import PostalCode
from storefront.domain.repository.address_lookup import AddressLookup
from storefront.domain.service.shipping_rates import ShippingRateTable


class QuoteShippingHandler:

    def __init__(
        self,
        address_lookup: AddressLookup,
        rates: ShippingRateTable | None = None,
    ) -> None:
        self._address_lookup = address_lookup
        self._rates = rates or ShippingRateTable()

    async def handle(self, snapshot: CheckoutSnapshot, postal_code: PostalCode) -> ShippingQuote:
        """Quote delivery of *snapshot* to *postal_code*.

        Callers parse the postal code first (``PostalCode.parse``), so a
        malformed code is rejected before anything else happens.
        """
        if snapshot.is_empty:
            raise ValidationError("Cart is empty")

        address = await self._address_lookup.lookup(postal_code)
        shipping = self._rates.rate_for(address.state)

        return ShippingQuote(
            address=address,
            subtotal=snapshot.total,
            shipping=shipping,
            total=snapshot.total + shipping,
        )
