"""
Farm Ledger CLI - Command-line interface.

Register and query ledger records from the terminal. The store is chosen by
the FL_STORE_BACKEND and FL_DB_PATH environment variables.
"""

from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from farm_ledger.config import LedgerSettings, create_store
from farm_ledger.core.exceptions import FarmLedgerError, format_exception
from farm_ledger.core.models import ENTITY_SCHEMAS, EntityKind, LedgerRecord
from farm_ledger.registry.ledger import FarmLedger

app = typer.Typer(
    name="farm-ledger",
    help="Farm Ledger - register and query farmers, consumers, products and transactions",
    no_args_is_help=True,
)
console = Console()

DbOption = typer.Option(None, "--db", help="SQLite database file (overrides FL_DB_PATH)")


@contextmanager
def _open_ledger(db: Optional[Path]) -> Iterator[FarmLedger]:
    """Open the configured store, report domain errors, and close the store."""
    try:
        settings = LedgerSettings.from_env()
        if db is not None:
            settings = settings.model_copy(update={"store_backend": "sqlite", "db_path": db})
        store = create_store(settings)
    except FarmLedgerError as e:
        console.print(f"[red]{escape(format_exception(e))}[/red]")
        raise typer.Exit(1)

    try:
        yield FarmLedger(store)
    except FarmLedgerError as e:
        console.print(f"[red]{escape(format_exception(e))}[/red]")
        raise typer.Exit(1)
    finally:
        store.close()


def _print_record(record: LedgerRecord) -> None:
    fields = record.model_dump(exclude_none=True)
    body = "\n".join(f"[cyan]{name}[/cyan]: {escape(value)}" for name, value in fields.items())
    console.print(Panel.fit(body, title=type(record).__name__))


@app.command("register-farmer")
def register_farmer(
    entity_id: str = typer.Argument(..., help="Farmer identifier (without prefix)"),
    name: str = typer.Argument(..., help="Farmer name"),
    email: Optional[str] = typer.Option(None, "--email", "-e", help="Contact email"),
    location: Optional[str] = typer.Option(None, "--location", "-l", help="Farm location"),
    db: Optional[Path] = DbOption,
):
    """Register a farmer."""
    with _open_ledger(db) as ledger:
        record = ledger.register_farmer(entity_id, name, email=email, location=location)
    console.print(f"[green]Registered:[/green] {record.id}")


@app.command("register-consumer")
def register_consumer(
    entity_id: str = typer.Argument(..., help="Consumer identifier (without prefix)"),
    name: str = typer.Argument(..., help="Consumer name"),
    location: str = typer.Argument(..., help="Consumer location"),
    db: Optional[Path] = DbOption,
):
    """Register a consumer."""
    with _open_ledger(db) as ledger:
        record = ledger.register_consumer(entity_id, name, location)
    console.print(f"[green]Registered:[/green] {record.id}")


@app.command("register-product")
def register_product(
    entity_id: str = typer.Argument(..., help="Product identifier (without prefix)"),
    farmer_id: str = typer.Argument(..., help="Farmer reference"),
    name: str = typer.Argument(..., help="Product name"),
    price: str = typer.Argument(..., help="Price as decimal text, e.g. 3.50"),
    db: Optional[Path] = DbOption,
):
    """Register a product."""
    with _open_ledger(db) as ledger:
        record = ledger.register_product(entity_id, farmer_id, name, price)
    console.print(f"[green]Registered:[/green] {record.id}")


@app.command("record-transaction")
def record_transaction(
    entity_id: str = typer.Argument(..., help="Transaction identifier (without prefix)"),
    farmer_id: str = typer.Argument(..., help="Farmer reference"),
    consumer_id: str = typer.Argument(..., help="Consumer reference"),
    amount: str = typer.Argument(..., help="Amount as decimal text"),
    timestamp: Optional[str] = typer.Option(
        None, "--timestamp", "-t", help="Timestamp text (default: now, UTC ISO 8601)"
    ),
    db: Optional[Path] = DbOption,
):
    """Record a transaction between a farmer and a consumer."""
    timestamp = timestamp or datetime.now(timezone.utc).isoformat()
    with _open_ledger(db) as ledger:
        record = ledger.record_transaction(entity_id, farmer_id, consumer_id, amount, timestamp)
    console.print(f"[green]Recorded:[/green] {record.id}")


@app.command()
def get(
    kind: EntityKind = typer.Argument(..., help="Entity kind"),
    entity_id: str = typer.Argument(..., help="Identifier (without prefix)"),
    db: Optional[Path] = DbOption,
):
    """Show one record."""
    with _open_ledger(db) as ledger:
        record = ledger.registry_for(kind).get(entity_id)
    _print_record(record)


@app.command("list")
def list_records(
    kind: EntityKind = typer.Argument(..., help="Entity kind"),
    db: Optional[Path] = DbOption,
):
    """List every record of a kind in key order."""
    with _open_ledger(db) as ledger:
        records = ledger.registry_for(kind).list_all()

    if not records:
        console.print(f"[yellow]No {kind.value} records found[/yellow]")
        return

    columns = ("id",) + ENTITY_SCHEMAS[kind].attributes
    table = Table(title=f"{kind.value.capitalize()} records ({len(records)})")
    for column in columns:
        table.add_column(column, style="cyan" if column == "id" else None)
    for record in records:
        values = record.model_dump()
        table.add_row(*(values.get(column) or "-" for column in columns))

    console.print(table)


@app.command()
def version():
    """Show Farm Ledger version."""
    from farm_ledger import __version__

    console.print(f"Farm Ledger v{__version__}")


if __name__ == "__main__":
    app()
