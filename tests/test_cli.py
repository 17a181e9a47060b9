"""Tests for CLI module."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from farm_ledger.cli import app
from farm_ledger.store.sqlite import SQLiteStore

runner = CliRunner()


@pytest.fixture
def db_path(temp_dir: Path) -> Path:
    """Database file shared by the commands of one test."""
    return temp_dir / "cli.db"


class TestRegisterCommands:
    """Tests for the register commands."""

    def test_register_farmer(self, db_path: Path) -> None:
        """Registering a farmer prints its key."""
        result = runner.invoke(
            app, ["register-farmer", "1", "Alice", "--email", "alice@example.com", "--db", str(db_path)]
        )
        assert result.exit_code == 0
        assert "farmer-1" in result.stdout

    def test_register_farmer_needs_contact_field(self, db_path: Path) -> None:
        """A farmer without email or location exits with code 1."""
        result = runner.invoke(app, ["register-farmer", "1", "Alice", "--db", str(db_path)])
        assert result.exit_code == 1
        assert "Invalid attributes for farmer record" in result.stdout

    def test_register_consumer(self, db_path: Path) -> None:
        """Registering a consumer prints its key."""
        result = runner.invoke(app, ["register-consumer", "7", "Bob", "Lyon", "--db", str(db_path)])
        assert result.exit_code == 0
        assert "consumer-7" in result.stdout

    def test_register_product_persists(self, db_path: Path) -> None:
        """Registered products are written to the database file."""
        result = runner.invoke(
            app, ["register-product", "10", "1", "Tomatoes", "3.50", "--db", str(db_path)]
        )
        assert result.exit_code == 0

        with SQLiteStore(db_path) as store:
            assert store.get("product-10") is not None

    def test_record_transaction_default_timestamp(self, db_path: Path) -> None:
        """Transactions get a timestamp when none is given."""
        result = runner.invoke(
            app, ["record-transaction", "t1", "1", "7", "12.00", "--db", str(db_path)]
        )
        assert result.exit_code == 0
        assert "transaction-t1" in result.stdout

    def test_invalid_identifier(self, db_path: Path) -> None:
        """Invalid identifiers exit with code 1."""
        result = runner.invoke(app, ["register-farmer", "a~b", "Alice", "--db", str(db_path)])
        assert result.exit_code == 1
        assert "reserved" in result.stdout


class TestGetCommand:
    """Tests for the get command."""

    def test_get_registered_farmer(self, db_path: Path) -> None:
        """get shows the stored record."""
        runner.invoke(
            app, ["register-farmer", "1", "Alice", "--email", "alice@example.com", "--db", str(db_path)]
        )
        result = runner.invoke(app, ["get", "farmer", "1", "--db", str(db_path)])
        assert result.exit_code == 0
        assert "Alice" in result.stdout
        assert "alice@example.com" in result.stdout

    def test_get_missing(self, db_path: Path) -> None:
        """Missing records exit with code 1."""
        result = runner.invoke(app, ["get", "consumer", "missing", "--db", str(db_path)])
        assert result.exit_code == 1
        assert "does not exist" in result.stdout

    def test_get_unknown_kind(self, db_path: Path) -> None:
        """Unknown kinds are rejected by argument parsing."""
        result = runner.invoke(app, ["get", "tractor", "1", "--db", str(db_path)])
        assert result.exit_code != 0


class TestListCommand:
    """Tests for the list command."""

    def test_list_empty(self, db_path: Path) -> None:
        """Empty kinds print a notice."""
        result = runner.invoke(app, ["list", "product", "--db", str(db_path)])
        assert result.exit_code == 0
        assert "No product records found" in result.stdout

    def test_list_in_key_order(self, db_path: Path) -> None:
        """Records are listed in ascending key order."""
        for consumer_id, name in (("b", "Bea"), ("a", "Ann")):
            runner.invoke(
                app, ["register-consumer", consumer_id, name, "Lyon", "--db", str(db_path)]
            )
        result = runner.invoke(app, ["list", "consumer", "--db", str(db_path)])
        assert result.exit_code == 0
        assert "Consumer records (2)" in result.stdout
        assert result.stdout.index("Ann") < result.stdout.index("Bea")

    def test_list_corrupt_record(self, db_path: Path) -> None:
        """A corrupt record fails the listing."""
        with SQLiteStore(db_path) as store:
            store.put("farmer-1", b"garbage")
        result = runner.invoke(app, ["list", "farmer", "--db", str(db_path)])
        assert result.exit_code == 1


class TestVersionCommand:
    """Tests for the version command."""

    def test_version(self) -> None:
        """Show version information."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Farm Ledger v" in result.stdout
