"""Key derivation for the course table."""

from __future__ import annotations

DEFAULT_TABLE_SIZE = 179  # prime

_ACCUMULATOR_MASK = 0xFFFFFFFF


def char_sum_hash(key: str, table_size: int = DEFAULT_TABLE_SIZE) -> int:
    """Map `key` to a bucket index in ``[0, table_size)``.

    Sums the UTF-8 byte values of the key in an unsigned 32-bit accumulator and
    reduces modulo the table size. Keys made of the same characters in any order
    land in the same bucket.
    """
    if table_size <= 0:
        raise ValueError(f"Table size must be positive, got {table_size}")

    total = 0
    for byte in key.encode("utf-8"):
        total = (total + byte) & _ACCUMULATOR_MASK
    return total % table_size
