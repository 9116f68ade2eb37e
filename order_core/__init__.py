"""Delivery order core - order aggregate, use cases and persistence adapters."""

__version__ = "1.0.0"
