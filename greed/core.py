"""Small shared helpers for the engine."""

from __future__ import annotations

import operator

_USIZE_BITS = 64
_U32_BITS = 32
_U16_BITS = 16


def bit(x: int) -> int:
    """Return an integer with only bit ``x`` set."""
    index = _require_unsigned("x", x, 8)
    if index >= _USIZE_BITS:
        raise ValueError(f"bit index {index} does not fit in {_USIZE_BITS} bits")
    return 1 << index


def _require_unsigned(name: str, value: object, bits: int) -> int:
    """Return ``value`` as an int, checking that it fits an unsigned ``bits``-bit slot."""
    try:
        number = operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(
            f"{name} must be an integer, not {type(value).__name__}"
        ) from None
    limit = 1 << bits
    if not 0 <= number < limit:
        raise ValueError(f"{name} must be between 0 and {limit - 1}, got {number}")
    return number