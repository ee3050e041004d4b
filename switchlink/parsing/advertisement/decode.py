from __future__ import annotations

import datetime as dt
from typing import Optional

from switchlink.domain.models import DeviceModel, model_info, resolve_model
from switchlink.errors import DecodeError, TruncatedPayload, UnsupportedDeviceType
from switchlink.parsing.advertisement.model import AdvertisementSnapshot
from switchlink.parsing.dispatch import DeviceTag, decode, resolve_tag
from switchlink.settings import DecoderSettings


def _model_from_service_data(raw: bytes) -> DeviceModel:
    if not raw:
        raise TruncatedPayload("service_data", 1, 0)
    model = resolve_model(raw[0])
    if model is None:
        raise UnsupportedDeviceType(raw[0])
    return model


def decode_advertisement(
    service_data: bytes | None,
    manufacturer_data: bytes | None = None,
    tag: Optional[DeviceTag] = None,
    received_at: Optional[dt.datetime] = None,
    settings: Optional[DecoderSettings] = None,
) -> AdvertisementSnapshot:
    """
    Decode one advertisement without raising on bad input.

    The model comes from ``tag`` when given, otherwise from the first byte
    of the service data. Plug Mini models are decoded from the manufacturer
    data (company id already stripped), every other family from the service
    data. Decode failures are reported through ``error`` and ``errors`` on
    the returned snapshot.

    Args:
        service_data: The SwitchBot service data field.
        manufacturer_data: Manufacturer data without the company id bytes.
        tag: Optional ``DeviceModel`` or model byte overriding the first byte.
        received_at: Capture time; defaults to now (UTC).
        settings: Decoder settings passed through to ``decode``.

    Returns:
        An ``AdvertisementSnapshot`` holding either the state or the error.
    """
    raw = bytes(service_data or b"")
    mfr = bytes(manufacturer_data) if manufacturer_data is not None else None
    snapshot = AdvertisementSnapshot(
        raw=raw,
        received_at=received_at or dt.datetime.now(dt.UTC),
        manufacturer_data=mfr,
    )

    try:
        if tag is None:
            snapshot.model = _model_from_service_data(raw)
            if raw[0] & 0x80:
                snapshot.warnings.append("model byte has bit 7 set")
        else:
            # Keep the catalogued model on the snapshot even when it has no decoder.
            snapshot.model = resolve_model(tag) if isinstance(tag, int) else None
            resolve_tag(tag)

        if model_info(snapshot.model).uses_manufacturer_data:
            if mfr is None:
                snapshot.warnings.append("no manufacturer data in advertisement")
            payload = mfr or b""
        else:
            payload = raw
        snapshot.state = decode(snapshot.model, payload, settings=settings)
    except DecodeError as exc:
        snapshot.error = exc
        snapshot.errors.append(f"{exc.code}: {exc}")

    return snapshot
