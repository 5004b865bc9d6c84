"""Tests for the ViaCEP address lookup, with httpx.MockTransport in place of the network."""

import httpx
import pytest

from storefront.domain.exceptions import EntityNotFoundError, FetchError
from storefront.domain.model.value_objects import PostalCode
from storefront.infrastructure.remote.viacep_address_lookup import ViaCepAddressLookup

TEMPLATE = "https://cep.test/ws/{postal_code}/json/"


def _lookup(handler) -> ViaCepAddressLookup:
    return ViaCepAddressLookup(TEMPLATE, transport=httpx.MockTransport(handler))


class TestLookup:

    @pytest.mark.asyncio
    async def test_maps_response(self):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json={
                "cep": "01001-000",
                "logradouro": "Praça da Sé",
                "bairro": "Sé",
                "localidade": "São Paulo",
                "uf": "SP",
            })

        address = await _lookup(handler).lookup(PostalCode("01001000"))

        assert seen == ["https://cep.test/ws/01001000/json/"]
        assert address.street == "Praça da Sé"
        assert address.district == "Sé"
        assert address.city == "São Paulo"
        assert address.state == "SP"
        assert address.postal_code == PostalCode("01001000")

    @pytest.mark.parametrize("flag", [True, "true"])
    @pytest.mark.asyncio
    async def test_unknown_code(self, flag):
        lookup = _lookup(lambda request: httpx.Response(200, json={"erro": flag}))
        with pytest.raises(EntityNotFoundError, match="01001-000"):
            await lookup.lookup(PostalCode("01001000"))

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(FetchError, match="Could not look up postal code"):
            await _lookup(handler).lookup(PostalCode("01001000"))

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        lookup = _lookup(lambda request: httpx.Response(200, content=b"nope"))
        with pytest.raises(FetchError, match="not valid JSON"):
            await lookup.lookup(PostalCode("01001000"))
