"""
Captured reference advertisements with their expected decode.

The captures are shipped as package data so downstream scanners can run
the same regression set against their own plumbing.
"""
from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Optional

from pydantic import BaseModel, field_validator

from switchlink.domain.models import DeviceModel


class CaptureRecord(BaseModel):
    name: str
    model: DeviceModel
    service_data: bytes
    manufacturer_data: Optional[bytes] = None
    expected: Optional[dict[str, Any]] = None
    expected_error: Optional[str] = None

    @field_validator("model", mode="before")
    @classmethod
    def _model_by_name(cls, value: Any) -> Any:
        if isinstance(value, str):
            return DeviceModel[value.upper()]
        return value

    @field_validator("service_data", "manufacturer_data", mode="before")
    @classmethod
    def _from_hex(cls, value: Any) -> Any:
        if isinstance(value, str):
            return bytes.fromhex(value)
        return value


@lru_cache
def _load_raw() -> dict[str, Any]:
    resource = resources.files("switchlink.captures").joinpath("reference.json")
    with resource.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_reference_captures(model: Optional[DeviceModel] = None) -> list[CaptureRecord]:
    records = [CaptureRecord.model_validate(entry) for entry in _load_raw().get("captures", [])]
    if model is None:
        return records
    return [record for record in records if record.model == model]


__all__ = ["CaptureRecord", "load_reference_captures"]
