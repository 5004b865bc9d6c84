"""Unit tests for the shipping rate table."""

from storefront.domain.model.value_objects import Money
from storefront.domain.service.shipping_rates import ShippingRateTable


class TestDefaultRates:

    def test_listed_states(self):
        table = ShippingRateTable()
        assert table.rate_for("SP") == Money.of("10.00")
        assert table.rate_for("RJ") == Money.of("15.00")
        assert table.rate_for("MG") == Money.of("20.00")

    def test_unlisted_state_pays_fallback(self):
        assert ShippingRateTable().rate_for("BA") == Money.of("30.00")

    def test_lookup_is_case_insensitive(self):
        assert ShippingRateTable().rate_for(" sp ") == Money.of("10.00")


class TestCustomRates:

    def test_custom_table_and_fallback(self):
        table = ShippingRateTable({"pr": Money.of("12.50")}, fallback=Money.of("40"))
        assert table.rate_for("PR") == Money.of("12.50")
        assert table.rate_for("SP") == Money.of("40")
