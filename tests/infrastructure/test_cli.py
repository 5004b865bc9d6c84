"""CLI tests through click's CliRunner, with the composition root patched to fakes."""

import pytest
from click.testing import CliRunner

from storefront.application.cart_use_case import CartUseCase
from storefront.application.quote_shipping import QuoteShippingHandler
from storefront.domain.model.cart import Cart
from storefront.domain.service.product_catalog import ProductCatalog
from storefront.infrastructure.cli import cart_commands, product_commands
from storefront.infrastructure.cli.main import cli
from tests.fakes import (
    FakeAddressLookup,
    FakeProductSource,
    failing_fetch,
    make_address,
    make_product,
)

CATALOG = [
    make_product(1, price="10.00", title="Backpack"),
    make_product(2, price="5.00", title="Mug"),
    make_product(3, price="55.99", title="Jacket"),
]


@pytest.fixture
def fake_store(monkeypatch):
    """Point every CLI command at in-memory fakes; returns a setter for the source."""

    def install(*responses):
        def build():
            return CartUseCase(ProductCatalog(FakeProductSource(*responses)), Cart())

        monkeypatch.setattr(cart_commands, "build_cart_use_case", build)
        monkeypatch.setattr(product_commands, "build_cart_use_case", build)

    monkeypatch.setattr(
        cart_commands,
        "quote_shipping_handler",
        lambda: QuoteShippingHandler(FakeAddressLookup({"01001000": make_address()})),
    )
    install(CATALOG)
    return install


class TestProductsCommand:

    def test_lists_products(self, fake_store):
        result = CliRunner().invoke(cli, ["products"])
        assert result.exit_code == 0, result.output
        assert "Backpack" in result.output
        assert "R$ 55.99" in result.output

    def test_search_and_sort(self, fake_store):
        result = CliRunner().invoke(cli, ["products", "--search", "a", "--sort", "price-desc"])
        assert result.exit_code == 0, result.output
        lines = [line for line in result.output.splitlines() if "R$" in line]
        assert [line.split()[0] for line in lines] == ["3", "1"]

    def test_paging_hint(self, fake_store):
        result = CliRunner().invoke(cli, ["products", "--per-page", "2"])
        assert "More results: --page 2" in result.output

    def test_no_match(self, fake_store):
        result = CliRunner().invoke(cli, ["products", "--search", "laptop"])
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_fetch_failure_is_reported(self, fake_store):
        fake_store(failing_fetch())
        result = CliRunner().invoke(cli, ["products"])
        assert result.exit_code == 1
        assert "Could not fetch catalog" in result.output


class TestBuyCommand:

    def test_buy_merges_repeated_ids(self, fake_store):
        result = CliRunner().invoke(cli, ["buy", "1", "1", "2"])
        assert result.exit_code == 0, result.output
        assert "Order placed:" in result.output
        assert "R$ 25.00" in result.output

    def test_unknown_id_warns_and_continues(self, fake_store):
        result = CliRunner().invoke(cli, ["buy", "1", "99"])
        assert result.exit_code == 0, result.output
        assert "product 99 not found" in result.output
        assert "R$ 10.00" in result.output

    def test_only_unknown_ids_fails(self, fake_store):
        result = CliRunner().invoke(cli, ["buy", "99"])
        assert result.exit_code == 1
        assert "Your cart is empty" in result.output

    def test_shipping_quote(self, fake_store):
        result = CliRunner().invoke(cli, ["buy", "1", "2", "--cep", "01001-000"])
        assert result.exit_code == 0, result.output
        assert "SP" in result.output
        assert "R$ 25.00" in result.output  # 15.00 + 10.00 shipping

    def test_bad_postal_code_places_no_order(self, fake_store):
        result = CliRunner().invoke(cli, ["buy", "1", "--postal-code", "123"])
        assert result.exit_code == 1
        assert "Invalid postal code format" in result.output
        assert "Order placed:" not in result.output

    def test_unknown_postal_code_places_no_order(self, fake_store):
        result = CliRunner().invoke(cli, ["buy", "1", "--cep", "99999999"])
        assert result.exit_code == 1
        assert "Postal code not found" in result.output
        assert "Order placed:" not in result.output


class TestShopCommand:

    def test_session(self, fake_store):
        script = "\n".join([
            "add 1",
            "add 1",
            "add 2",
            "qty 1 -1",
            "cart",
            "remove 2",
            "add 42",
            "bogus",
            "checkout",
            "cart",
            "quit",
        ]) + "\n"
        result = CliRunner().invoke(cli, ["shop"], input=script)

        assert result.exit_code == 0, result.output
        assert "Cart: 3 item(s)" in result.output
        assert "Product 42 not found." in result.output
        assert "Unknown command 'bogus'" in result.output
        assert "Order placed:" in result.output
        assert "Cart is empty." in result.output

    def test_checkout_empty(self, fake_store):
        result = CliRunner().invoke(cli, ["shop"], input="checkout\n")
        assert result.exit_code == 0
        assert "Your cart is empty!" in result.output

    def test_bad_delta(self, fake_store):
        result = CliRunner().invoke(cli, ["shop"], input="add 1\nqty 1 many\n")
        assert "Invalid quantity change 'many'" in result.output

    def test_checkout_with_shipping(self, fake_store):
        result = CliRunner().invoke(cli, ["shop"], input="add 3\ncheckout 01001000\n")
        assert result.exit_code == 0, result.output
        assert "R$ 65.99" in result.output

    def test_bad_postal_code_keeps_cart_for_retry(self, fake_store):
        script = "add 1\ncheckout 123\ncart\ncheckout 01001000\n"
        result = CliRunner().invoke(cli, ["shop"], input=script)

        assert result.exit_code == 0, result.output
        before_retry, retry = result.output.split("Invalid postal code format", 1)
        assert "Order placed:" not in before_retry
        assert "Cart is empty." not in retry.split("Order placed:")[0]
        assert "Backpack" in retry.split("Order placed:")[0]
        assert "Your cart is empty!" not in result.output
        assert "R$ 20.00" in retry  # 10.00 + 10.00 shipping to SP

    def test_unknown_postal_code_keeps_cart(self, fake_store):
        script = "add 2\ncheckout 99999999\ncart\n"
        result = CliRunner().invoke(cli, ["shop"], input=script)

        assert "Postal code not found" in result.output
        assert "Order placed:" not in result.output
        assert "Mug" in result.output.split("Postal code not found", 1)[1]

    def test_catalog_failure_aborts(self, fake_store):
        fake_store(failing_fetch())
        result = CliRunner().invoke(cli, ["shop"], input="quit\n")
        assert result.exit_code == 1
        assert "Could not fetch catalog" in result.output
