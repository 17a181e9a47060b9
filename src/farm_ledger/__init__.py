"""
Farm Ledger - prefixed entity registry over an ordered key-value store.

Registers farmers, consumers, products and transactions under namespaced
keys and reads them back by key or by prefix range scan.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
