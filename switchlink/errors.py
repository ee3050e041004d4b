"""
Decode error taxonomy.

Every failure raised while decoding an advertisement is a ``DecodeError``.
The base class derives from ``ValueError`` so callers that only care about
"bad input" can catch that, while callers that need to tell a short packet
from an unrecognised firmware variant can catch the specific subclass.
"""
from __future__ import annotations

from typing import Optional


class DecodeError(ValueError):
    """Base class for all advertisement decode failures."""

    code = "decode_error"


class TruncatedPayload(DecodeError):
    code = "truncated_payload"

    def __init__(self, family: str, required: int, actual: int) -> None:
        self.family = family
        self.required = required
        self.actual = actual
        super().__init__(f"{family} payload needs at least {required} bytes, got {actual}")


class UnsupportedDeviceType(DecodeError):
    code = "unsupported_device_type"

    def __init__(self, tag: object) -> None:
        self.tag = tag
        label = f"0x{tag:02x}" if isinstance(tag, int) else repr(tag)
        super().__init__(f"Unsupported device type: {label}")


class UnknownMode(DecodeError):
    code = "unknown_mode"

    def __init__(self, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Unknown {field} value: 0x{value:02x}")


class InvalidEncoding(DecodeError):
    code = "invalid_encoding"

    def __init__(self, field: str, reason: str, value: Optional[int | float] = None) -> None:
        self.field = field
        self.reason = reason
        self.value = value
        super().__init__(f"Invalid {field}: {reason}")


__all__ = ["DecodeError", "TruncatedPayload", "UnsupportedDeviceType", "UnknownMode", "InvalidEncoding"]
