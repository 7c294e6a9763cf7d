"""End-to-end tests for the click CLI against a throwaway data directory."""

import json

import pytest
from click.testing import CliRunner

from catalog.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    env = {"CATALOG_DATA_DIR": str(tmp_path), "CATALOG_LOG_LEVEL": "WARNING"}

    def _run(*args):
        return runner.invoke(cli, list(args), env=env)

    return _run


def _add(run, sku="mse-001", stock="50", price="20", category="electronics"):
    result = run(
        "product", "add",
        "--name", "Mouse",
        "--description", "Wireless mouse",
        "--price", price,
        "--stock", stock,
        "--sku", sku,
        "--category", category,
        "--json",
    )
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


class TestProductCommands:

    def test_add_returns_product(self, run):
        created = _add(run)
        assert created["sku"] == "MSE-001"
        assert created["formatted_price"] == "$20.00"
        assert created["is_active"] is True
        assert created["is_in_stock"] is True
        assert created["is_low_stock"] is False

    def test_duplicate_sku_is_conflict(self, run):
        _add(run)
        result = run(
            "product", "add", "--name", "Other", "--description", "x",
            "--price", "1", "--stock", "1", "--sku", "MSE-001", "--category", "c",
        )
        assert result.exit_code == 1
        assert "[409]" in result.output
        assert "MSE-001" in result.output

    def test_negative_price_rejected_at_boundary(self, run):
        result = run(
            "product", "add", "--name", "x", "--description", "x",
            "--price", "-1", "--stock", "1", "--sku", "ABC-123", "--category", "c",
        )
        assert result.exit_code == 2

    def test_show_by_id_and_sku(self, run):
        created = _add(run)
        by_id = run("product", "show", "--id", created["id"], "--json")
        by_sku = run("product", "show", "--sku", "mse-001", "--json")
        assert json.loads(by_id.stdout)["id"] == created["id"]
        assert json.loads(by_sku.stdout)["id"] == created["id"]

    def test_show_needs_exactly_one_key(self, run):
        assert run("product", "show").exit_code == 2

    def test_show_missing_is_not_found(self, run):
        result = run("product", "show", "--id", "nope")
        assert result.exit_code == 1
        assert "[404]" in result.output

    def test_list_filters_and_pages(self, run):
        _add(run, sku="AAA-001", stock="0")
        _add(run, sku="AAA-002", price="150")
        _add(run, sku="AAA-003", price="300")

        result = run(
            "product", "list", "--in-stock", "--min-price", "100",
            "--sort-by", "price", "--sort-order", "asc", "--json",
        )

        page = json.loads(result.stdout)
        assert [p["sku"] for p in page["data"]] == ["AAA-002", "AAA-003"]
        assert page["meta"]["total_items"] == 2
        assert page["meta"]["has_next_page"] is False

    def test_list_table_when_empty(self, run):
        result = run("product", "list")
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_update_partial(self, run):
        created = _add(run)
        result = run("product", "update", "--id", created["id"], "--price", "35.5", "--json")
        updated = json.loads(result.stdout)
        assert updated["formatted_price"] == "$35.50"
        assert updated["name"] == "Mouse"

    def test_delete(self, run):
        created = _add(run)
        assert run("product", "delete", "--id", created["id"]).exit_code == 0
        assert "[404]" in run("product", "delete", "--id", created["id"]).output

    def test_deactivate_blocks_purchase(self, run):
        created = _add(run)
        assert "inactive" in run("product", "deactivate", "--id", created["id"]).output

        result = run("product", "check", "--id", created["id"], "--quantity", "1")
        assert result.exit_code == 1
        assert "[400]" in result.output

        run("product", "activate", "--id", created["id"])
        ok = run("product", "check", "--id", created["id"], "--quantity", "1")
        assert ok.exit_code == 0
        assert "available" in ok.output


class TestStockCommands:

    def test_decrement_and_insufficient_stock(self, run):
        created = _add(run, stock="5")

        ok = run("stock", "decrement", "--id", created["id"], "--quantity", "3")
        assert ok.exit_code == 0
        assert "is now 2" in ok.output

        bad = run("stock", "decrement", "--id", created["id"], "--quantity", "10")
        assert bad.exit_code == 1
        assert "[400] Insufficient stock" in bad.output

    def test_increment(self, run):
        created = _add(run, stock="5")
        result = run("stock", "increment", "--id", created["id"], "--quantity", "10")
        assert "is now 15" in result.output

    def test_zero_quantity_rejected_at_boundary(self, run):
        created = _add(run)
        assert run("stock", "increment", "--id", created["id"], "--quantity", "0").exit_code == 2

    def test_reports(self, run):
        _add(run, sku="LOW-001", stock="3")
        _add(run, sku="OUT-001", stock="0")
        _add(run, sku="LOT-001", stock="500")

        assert "LOW-001" in run("stock", "low").output
        assert "OUT-001" in run("stock", "out").output
        stats = run("stats").output
        assert "Active products:       3" in stats
        assert "Out-of-stock products: 1" in stats


class TestCategoryCommands:

    def test_count_list_and_reprice(self, run):
        _add(run, sku="BOO-001", category="books", price="10")
        _add(run, sku="BOO-002", category="books", price="20")
        _add(run, sku="TOY-001", category="toys")

        assert "2 product(s) in 'books'" in run("category", "count", "--category", "books").output
        assert "BOO-002" in run("category", "list", "--category", "books").output

        result = run("category", "reprice", "--category", "books", "--percent=-15")
        assert "Repriced 2 product(s)" in result.output

        shown = run("product", "show", "--sku", "BOO-002", "--json")
        assert json.loads(shown.stdout)["formatted_price"] == "$17.00"

    def test_reprice_to_zero_rejected(self, run):
        result = run("category", "reprice", "--category", "books", "--percent=-100")
        assert result.exit_code == 1
        assert "[400]" in result.output

    def test_paged_list(self, run):
        _add(run, sku="BOO-001", category="books")
        _add(run, sku="BOO-002", category="books")
        result = run("category", "list", "--category", "books", "--page", "2", "--page-size", "1")
        assert "Page 2/2" in result.output
