"""
FastAPI dependencies.
"""

from fastapi import Request

from farm_ledger.registry.ledger import FarmLedger


def get_ledger(request: Request) -> FarmLedger:
    """Return the ledger attached to the running application."""
    return request.app.state.ledger
