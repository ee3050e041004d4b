from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from switchlink.domain.models import DeviceModel
from switchlink.errors import DecodeError
from switchlink.parsing.dispatch import DecodedState


@dataclass
class AdvertisementSnapshot:
    raw: bytes
    received_at: datetime
    model: Optional[DeviceModel] = None
    state: Optional[DecodedState] = None
    error: Optional[DecodeError] = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    manufacturer_data: Optional[bytes] = None

    @property
    def ok(self) -> bool:
        return self.state is not None and self.error is None

    def as_dict(self) -> dict[str, Any]:
        return {
            "raw": self.raw.hex(),
            "received_at": self.received_at.isoformat(),
            "model": self.model.name if self.model is not None else None,
            "state": self.state.as_dict() if self.state is not None else None,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
