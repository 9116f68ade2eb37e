"""Order number generation."""
import secrets
import string
import time

_ALPHABET = string.digits + string.ascii_uppercase
PREFIX = "ORD"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_ALPHABET[remainder])
    return "".join(reversed(digits))


def generate_order_number(prefix: str = PREFIX) -> str:
    """
    Build a human-friendly order number.

    Format: ``ORD-<millis base36>-<4 random base36 chars>``, e.g.
    ``ORD-LZ1K9Q2B-7XQ4``.

    Uniqueness is best-effort only; storage enforces it with a unique
    constraint and reports collisions as ConflictError.
    """
    timestamp = _to_base36(time.time_ns() // 1_000_000)
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(4))
    return f"{prefix}-{timestamp}-{suffix}"
