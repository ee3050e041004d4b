"""
Device type dispatch.

Maps a model tag to the decoder for its family, checks the payload length
before any field is read, and returns one of the ``DecodedState`` variants.
"""
from __future__ import annotations

from typing import Callable, Optional, Union

from switchlink import const
from switchlink.core.binary import require_length
from switchlink.domain.models import DeviceModel, SUPPORTED_MODELS
from switchlink.errors import DecodeError, InvalidEncoding, UnsupportedDeviceType
from switchlink.logging import create_logger, payload_details
from switchlink.parsing.bot import BotState, decode_bot
from switchlink.parsing.humidifier import HumidifierState, decode_humidifier
from switchlink.parsing.meter import MeterPlusState, MeterState, decode_meter, decode_meter_plus
from switchlink.parsing.plug import PlugMiniState, decode_plug_mini
from switchlink.settings import DecoderSettings, get_settings

DecodedState = Union[BotState, MeterState, MeterPlusState, HumidifierState, PlugMiniState]

DeviceTag = Union[DeviceModel, int]

# model -> (decoder, minimum length, full layout length)
_DECODERS: dict[DeviceModel, tuple[Callable[[bytes], DecodedState], int, int]] = {
    DeviceModel.BOT: (decode_bot, const.BOT_MIN_LENGTH, const.BOT_MIN_LENGTH),
    DeviceModel.METER: (decode_meter, const.METER_MIN_LENGTH, const.METER_MIN_LENGTH),
    DeviceModel.METER_PLUS: (decode_meter_plus, const.METER_MIN_LENGTH, const.METER_PLUS_EXTENDED_LENGTH),
    DeviceModel.HUMIDIFIER: (decode_humidifier, const.HUMIDIFIER_MIN_LENGTH, const.HUMIDIFIER_MIN_LENGTH),
    DeviceModel.PLUG_MINI_US: (decode_plug_mini, const.PLUG_MINI_MIN_LENGTH, const.PLUG_MINI_MIN_LENGTH),
    DeviceModel.PLUG_MINI_JP: (decode_plug_mini, const.PLUG_MINI_MIN_LENGTH, const.PLUG_MINI_MIN_LENGTH),
}


def resolve_tag(tag: DeviceTag) -> DeviceModel:
    """
    Resolve a caller supplied tag to one of the supported models.

    Integers are treated as raw model bytes, so bit 7 is ignored.

    Raises:
        UnsupportedDeviceType: If the tag is not one of the decodable models.
    """
    if isinstance(tag, DeviceModel):
        model = tag
    elif isinstance(tag, int) and not isinstance(tag, bool):
        if not 0 <= tag <= 0xFF:
            raise UnsupportedDeviceType(tag)
        try:
            model = DeviceModel(tag & const.MODEL_BYTE_MASK)
        except ValueError:
            raise UnsupportedDeviceType(tag) from None
    else:
        raise UnsupportedDeviceType(tag)
    if model not in SUPPORTED_MODELS:
        raise UnsupportedDeviceType(tag)
    return model


def minimum_length(tag: DeviceTag) -> int:
    return _DECODERS[resolve_tag(tag)][1]


def decode(tag: DeviceTag, payload: bytes, settings: Optional[DecoderSettings] = None) -> DecodedState:
    """
    Decode a raw advertisement payload for the given device type.

    Args:
        tag: A ``DeviceModel`` or raw model byte.
        payload: Service data (manufacturer data for the Plug Mini).
        settings: Decoder settings; defaults to ``get_settings()``.

    Returns:
        The decoded state for the device family.

    Raises:
        UnsupportedDeviceType: The tag is outside the supported families.
        TruncatedPayload: The payload is shorter than the family minimum.
        UnknownMode: A mode or level field holds an unrecognised value.
        InvalidEncoding: A field is physically impossible, or the payload
            is oversized while ``strict_length`` is enabled.
    """
    settings = settings or get_settings()
    logger = create_logger(__name__, settings.log_ring_size, settings.log_level)
    model = resolve_tag(tag)
    data = bytes(payload)
    decoder, min_length, layout_length = _DECODERS[model]

    try:
        require_length(data, min_length, model.name.lower())
        if settings.strict_length and len(data) > layout_length:
            raise InvalidEncoding("length", f"expected at most {layout_length} bytes", len(data))
        state = decoder(data)
    except DecodeError as exc:
        logger.info("decode_failed", extra={"details": payload_details(model, data, error=exc.code)})
        raise

    logger.debug("decoded", extra={"details": payload_details(model, data)})
    return state


__all__ = ["DecodedState", "DeviceTag", "decode", "minimum_length", "resolve_tag"]
