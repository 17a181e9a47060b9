"""
API middleware.
"""

from farm_ledger.api.middleware.logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
