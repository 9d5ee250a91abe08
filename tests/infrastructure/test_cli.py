"""Smoke tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    (tmp_path / "products.json").write_text(json.dumps([
        {"id": "1", "code": "X-1", "name": "Produto X", "price": "10.00", "group": "X"},
    ]), encoding="utf-8")
    (tmp_path / "discount_policies.json").write_text(json.dumps([
        {"id": "p", "group": "X", "min_quantity": 5, "max_quantity": 9, "rate": "0.10"},
    ]), encoding="utf-8")
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOREFRONT_EXPORT_DIR", str(tmp_path / "orders"))
    monkeypatch.setenv("STOREFRONT_STORE_NAME", "Dicolore")
    return CliRunner()


def _invoke(runner, *args):
    return runner.invoke(cli, list(args))


CUSTOMER_ARGS = [
    "checkout", "customer", "--name", "Maria Silva", "--tax-id", "123",
    "--address", "Rua A, 1", "--phone", "11999990000",
    "--payment", "pix", "--delivery", "manha",
]


class TestCatalogCommands:

    def test_product_list(self, runner):
        result = _invoke(runner, "product", "list")
        assert result.exit_code == 0
        assert "Produto X" in result.output
        assert "R$ 10,00" in result.output

    def test_policy_list(self, runner):
        result = _invoke(runner, "policy", "list")
        assert result.exit_code == 0
        assert "5-9" in result.output
        assert "10%" in result.output


class TestCartCommands:

    def test_add_and_show(self, runner):
        for _ in range(5):
            assert _invoke(runner, "cart", "add", "--id", "1").exit_code == 0

        result = _invoke(runner, "cart", "show")
        assert result.exit_code == 0
        assert "X (5 items) 10%" in result.output
        assert "R$ 45,00" in result.output

    def test_add_unknown_product_fails(self, runner):
        result = _invoke(runner, "cart", "add", "--id", "999")
        assert result.exit_code != 0
        assert "Product not found" in result.output

    def test_set_remove_and_clear(self, runner):
        _invoke(runner, "cart", "add", "--id", "1")
        assert "in cart: 3" in _invoke(runner, "cart", "set", "--id", "1", "--quantity", "3").output
        assert "in cart: 2" in _invoke(runner, "cart", "remove", "--id", "1").output
        assert _invoke(runner, "cart", "clear").exit_code == 0
        assert "empty" in _invoke(runner, "cart", "show").output

    def test_corrupt_session_is_reported(self, runner, tmp_path):
        (tmp_path / "session.json").write_text(json.dumps({
            "stage": "BOGUS", "items": [], "customer_data": None,
        }), encoding="utf-8")

        result = _invoke(runner, "cart", "show")

        assert result.exit_code != 0
        assert "Corrupt session file" in result.output
        assert not isinstance(result.exception, ValueError)


class TestCheckoutCommands:

    def test_incomplete_customer_data_blocks_summary(self, runner):
        _invoke(runner, "cart", "add", "--id", "1")
        result = _invoke(runner, "checkout", "customer", "--name", "Maria")
        assert result.exit_code != 0
        assert "Missing customer data" in result.output

        summary = _invoke(runner, "checkout", "summary")
        assert summary.exit_code != 0

    def test_full_flow(self, runner, tmp_path):
        for _ in range(5):
            _invoke(runner, "cart", "add", "--id", "1")
        assert _invoke(runner, *CUSTOMER_ARGS).exit_code == 0

        summary = _invoke(runner, "checkout", "summary")
        assert summary.exit_code == 0
        assert "PEDIDO DICOLORE" in summary.output
        assert "TOTAL FINAL: R$ 45,00" in summary.output

        export = _invoke(runner, "checkout", "export")
        assert export.exit_code == 0
        files = list((tmp_path / "orders").glob("pedido-*.txt"))
        assert len(files) == 1
        assert "TOTAL FINAL: R$ 45,00" in files[0].read_text(encoding="utf-8")

        assert _invoke(runner, "checkout", "back").exit_code == 0
        assert _invoke(runner, *CUSTOMER_ARGS).exit_code == 0
        assert _invoke(runner, "checkout", "finish").exit_code == 0
        assert "empty" in _invoke(runner, "cart", "show").output
