"""Abstract postal-code lookup service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.address import Address
from storefront.domain.model.value_objects import PostalCode


class AddressLookup(ABC):

    @abstractmethod
    async def lookup(self, postal_code: PostalCode) -> Address:
        """Resolve a postal code to an address.

        Raises EntityNotFoundError if the code is unknown and FetchError
        if the service could not be reached.
        """
