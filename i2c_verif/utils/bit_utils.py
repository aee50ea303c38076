#    Copyright 2026 Two Sigma Open Source, LLC
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.

"""Bit ordering helpers for bus payloads.

BIT UTILS
=========

Bytes travel MSB first on the bus. These helpers convert between a payload
value and the bit sequence the driver places on the data line.
"""

from i2c_verif.config import FRAME_BITS

__all__ = ["bit_at", "msb_first_bits", "pack_msb_first"]


def bit_at(value: int, index: int) -> int:
    """Return bit ``index`` of ``value`` (0 = LSB).

    Example:
        >>> bit_at(0xA5, 7)
        1
        >>> bit_at(0xA5, 6)
        0
    """
    return (value >> index) & 0x1


def msb_first_bits(value: int, width: int = FRAME_BITS) -> list[int]:
    """Expand ``value`` into ``width`` bits, most significant first.

    Example:
        >>> msb_first_bits(0xA5)
        [1, 0, 1, 0, 0, 1, 0, 1]
    """
    return [bit_at(value, index) for index in range(width - 1, -1, -1)]


def pack_msb_first(bits: list[int]) -> int:
    """Inverse of msb_first_bits: pack a bit sequence into an integer."""
    value = 0
    for bit in bits:
        value = (value << 1) | (bit & 0x1)
    return value
