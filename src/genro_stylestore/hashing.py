# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Default hash function for content-addressed style nodes."""

from __future__ import annotations

from typing import Callable

HashFunction = Callable[[str], str]

_BASE36_DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'


def to_base36(value: int) -> str:
    """Encode a non-negative integer in lowercase base-36."""
    if value < 0:
        raise ValueError(f"Cannot encode negative value: {value}")
    if value == 0:
        return '0'
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return ''.join(reversed(digits))


def string_hash(text: str) -> str:
    """Hash a string with the 32-bit djb2-xor rolling hash.

    Characters are consumed from the end as UTF-16 code units, starting
    from 5381 and folding each one in with ``(value * 33) ^ unit``.
    The unsigned 32-bit result is returned in base-36.

    Example:
        >>> string_hash('')
        '45h'
        >>> string_hash('a')
        '3t1g'
    """
    value = 5381
    data = text.encode('utf-16-le', 'surrogatepass')
    for i in range(len(data) - 2, -1, -2):
        unit = data[i] | (data[i + 1] << 8)
        value = ((value * 33) ^ unit) & 0xFFFFFFFF
    return to_base36(value)
