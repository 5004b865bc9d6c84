"""ViaCEP implementation of AddressLookup."""

from __future__ import annotations

import logging

import httpx

from storefront.domain.exceptions import EntityNotFoundError, FetchError
from storefront.domain.model.address import Address
from storefront.domain.model.value_objects import PostalCode
from storefront.domain.repository.address_lookup import AddressLookup

logger = logging.getLogger(__name__)


class ViaCepAddressLookup(AddressLookup):

    def __init__(
        self,
        url_template: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        # e.g. "https://viacep.com.br/ws/{postal_code}/json/"
        self._url_template = url_template
        self._timeout = timeout
        self._transport = transport

    async def lookup(self, postal_code: PostalCode) -> Address:
        url = self._url_template.format(postal_code=postal_code.digits)
        logger.debug("Looking up postal code %s at %s", postal_code, url)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Postal code lookup for %s failed: %s", postal_code, exc)
            raise FetchError(f"Could not look up postal code: {exc}", cause=exc) from exc
        except ValueError as exc:
            raise FetchError("Postal code response is not valid JSON", cause=exc) from exc

        # ViaCEP answers 200 with {"erro": true} for well-formed but unknown codes
        if not isinstance(data, dict) or data.get("erro"):
            raise EntityNotFoundError(f"Postal code not found: {postal_code}")

        return Address(
            postal_code=postal_code,
            street=data.get("logradouro", ""),
            district=data.get("bairro", ""),
            city=data.get("localidade", ""),
            state=data.get("uf", ""),
        )
