"""Infrastructure layer: logging, database wiring and in-memory adapters.

Keep this package import-light; import concrete adapters from their
subpackages.
"""

__all__ = []
