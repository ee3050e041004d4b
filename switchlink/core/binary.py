from __future__ import annotations

from typing import Mapping, TypeVar

from switchlink.errors import InvalidEncoding, TruncatedPayload, UnknownMode

T = TypeVar("T")


def require_length(data: bytes, minimum: int, family: str) -> None:
    if len(data) < minimum:
        raise TruncatedPayload(family, minimum, len(data))


def byte_at(data: bytes, index: int, family: str = "payload") -> int:
    if index < 0 or index >= len(data):
        raise TruncatedPayload(family, index + 1, len(data))
    return data[index]


def get_bit(byte_value: int, bit_index: int) -> bool:
    if bit_index < 0 or bit_index > 7:
        raise ValueError("bit_index must be between 0 and 7")
    return bool(byte_value & (1 << bit_index))


def read_flag(data: bytes, index: int, bit_index: int) -> bool:
    return get_bit(byte_at(data, index), bit_index)


def read_percentage(data: bytes, index: int, mask: int = 0x7F) -> int:
    """
    Extract a percentage from the masked bits of one byte.

    Firmware occasionally reports raw values above 100 (battery fields in
    particular), so the result is clamped into ``[0, 100]`` rather than
    rejected.
    """
    value = byte_at(data, index) & mask
    return max(0, min(100, value))


def read_signed_temperature(data: bytes, fraction_index: int, integer_index: int) -> float:
    """
    Decode a sign-magnitude temperature with one decimal digit.

    The integer byte carries the sign in bit 7 (set means positive, clear
    means negative) and the whole degrees in bits 0-6. The low nibble of the
    fraction byte holds the tenths digit.

    Args:
        data: The raw payload.
        fraction_index: Offset of the byte holding the tenths digit.
        integer_index: Offset of the byte holding sign and whole degrees.

    Returns:
        The temperature in degrees Celsius. A negative sign with zero
        magnitude decodes as ``0.0``.

    Raises:
        TruncatedPayload: If either offset lies outside the payload.
        InvalidEncoding: If the tenths digit is greater than 9.
    """
    fraction = byte_at(data, fraction_index) & 0x0F
    integer_byte = byte_at(data, integer_index)
    if fraction > 9:
        raise InvalidEncoding("temperature", "tenths digit out of range", fraction)
    magnitude = (integer_byte & 0x7F) * 10 + fraction
    if magnitude == 0:
        return 0.0
    sign = 1 if get_bit(integer_byte, 7) else -1
    return sign * magnitude / 10


def read_mode_enum(data: bytes, index: int, mask: int, table: Mapping[int, T], field: str = "mode") -> T:
    raw = byte_at(data, index) & mask
    try:
        return table[raw]
    except KeyError:
        raise UnknownMode(field, raw) from None


def read_fixed_point(data: bytes, index: int, mask: int = 0xFFFF, divisor: int = 1) -> float:
    """Read a big-endian 16-bit word at ``index``, mask it and scale it down by ``divisor``."""
    high = byte_at(data, index)
    low = byte_at(data, index + 1)
    return (((high << 8) | low) & mask) / divisor


def read_uint16_be(data: bytes, index: int) -> int:
    return (byte_at(data, index) << 8) | byte_at(data, index + 1)


def format_payload(data: bytes) -> str:
    return data.hex(" ")
