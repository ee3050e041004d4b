"""Tests for device type dispatch."""
import logging

import pytest

from switchlink import const
from switchlink.domain.models import DeviceModel, SUPPORTED_MODELS
from switchlink.errors import InvalidEncoding, TruncatedPayload, UnsupportedDeviceType
from switchlink.logging import get_ring_buffer
from switchlink.parsing.bot import BotState
from switchlink.parsing.dispatch import decode, minimum_length, resolve_tag
from switchlink.parsing.humidifier import HumidifierState
from switchlink.parsing.meter import MeterPlusState, MeterState
from switchlink.parsing.plug import PlugMiniState
from switchlink.settings import DecoderSettings

PAYLOADS = {
    DeviceModel.BOT: bytes.fromhex("484064"),
    DeviceModel.METER: bytes.fromhex("540050050c37"),
    DeviceModel.METER_PLUS: bytes.fromhex("69005a0398300320"),
    DeviceModel.HUMIDIFIER: bytes.fromhex("65800000bc"),
    DeviceModel.PLUG_MINI_US: bytes.fromhex("aabbccddeeff0180003c05fa"),
    DeviceModel.PLUG_MINI_JP: bytes.fromhex("aabbccddeeff0180003c05fa"),
}


def test_every_supported_model_has_a_payload_fixture():
    assert set(PAYLOADS) == set(SUPPORTED_MODELS)


@pytest.mark.parametrize(
    "model, state_type",
    [
        (DeviceModel.BOT, BotState),
        (DeviceModel.METER, MeterState),
        (DeviceModel.METER_PLUS, MeterPlusState),
        (DeviceModel.HUMIDIFIER, HumidifierState),
        (DeviceModel.PLUG_MINI_US, PlugMiniState),
        (DeviceModel.PLUG_MINI_JP, PlugMiniState),
    ],
)
def test_dispatch_selects_decoder(model, state_type):
    assert isinstance(decode(model, PAYLOADS[model]), state_type)


def test_meter_scenario():
    assert decode(DeviceModel.METER, PAYLOADS[DeviceModel.METER]) == MeterState(
        temperature=-12.5, humidity=55, battery=80
    )


def test_plug_scenario():
    state = decode(DeviceModel.PLUG_MINI_US, PAYLOADS[DeviceModel.PLUG_MINI_US])
    assert state.is_on is True
    assert state.power == 153.0


def test_raw_model_byte_accepted():
    assert decode(0x48, PAYLOADS[DeviceModel.BOT]) == decode(DeviceModel.BOT, PAYLOADS[DeviceModel.BOT])


def test_raw_model_byte_high_bit_ignored():
    assert resolve_tag(0xC8) is DeviceModel.BOT


@pytest.mark.parametrize("model", sorted(SUPPORTED_MODELS))
def test_every_shorter_payload_is_truncated(model):
    payload = PAYLOADS[model]
    for length in range(minimum_length(model)):
        with pytest.raises(TruncatedPayload):
            decode(model, payload[:length])


@pytest.mark.parametrize(
    "tag", [DeviceModel.CURTAIN, DeviceModel.HUB_MINI, 0x00, 0x7E, 0x148, -56, 0x1000048, 0x100, "bot", None, True]
)
def test_unsupported_tag(tag):
    for payload in (b"", PAYLOADS[DeviceModel.BOT], b"\xff" * 32):
        with pytest.raises(UnsupportedDeviceType):
            decode(tag, payload)


def test_unsupported_tag_checked_before_payload():
    with pytest.raises(UnsupportedDeviceType):
        decode(DeviceModel.CURTAIN, None)


def test_minimum_lengths():
    assert minimum_length(DeviceModel.BOT) == const.BOT_MIN_LENGTH
    assert minimum_length(DeviceModel.METER_PLUS) == const.METER_MIN_LENGTH
    assert minimum_length(DeviceModel.PLUG_MINI_JP) == const.PLUG_MINI_MIN_LENGTH


def test_trailing_bytes_ignored_by_default():
    state = decode(DeviceModel.HUMIDIFIER, PAYLOADS[DeviceModel.HUMIDIFIER] + b"\x00\x00")
    assert state.target_humidity == 60


def test_strict_length_rejects_oversized_payload():
    settings = DecoderSettings(strict_length=True)
    with pytest.raises(InvalidEncoding):
        decode(DeviceModel.BOT, PAYLOADS[DeviceModel.BOT] + b"\x00", settings=settings)


def test_strict_length_allows_meter_plus_extension():
    settings = DecoderSettings(strict_length=True)
    state = decode(DeviceModel.METER_PLUS, PAYLOADS[DeviceModel.METER_PLUS], settings=settings)
    assert state.co2_ppm == 800


def test_accepts_bytearray():
    assert decode(DeviceModel.BOT, bytearray(PAYLOADS[DeviceModel.BOT])).battery == 100


@pytest.mark.parametrize("model", sorted(SUPPORTED_MODELS))
def test_decode_is_idempotent(model):
    assert decode(model, PAYLOADS[model]) == decode(model, PAYLOADS[model])


def test_out_of_byte_range_tag_never_decodes():
    for tag in (0x148, -56, 0x1000048):
        with pytest.raises(UnsupportedDeviceType):
            minimum_length(tag)


def test_decode_events_recorded():
    settings = DecoderSettings(log_level="DEBUG")
    decode(DeviceModel.BOT, PAYLOADS[DeviceModel.BOT], settings=settings)
    ring = get_ring_buffer(logging.getLogger("switchlink.parsing.dispatch"))
    assert ring is not None
    ring.clear()

    decode(DeviceModel.BOT, PAYLOADS[DeviceModel.BOT], settings=settings)
    with pytest.raises(TruncatedPayload):
        decode(DeviceModel.METER, b"\x54", settings=settings)

    events = ring.get_events()
    assert [e["event"] for e in events] == ["decoded", "decode_failed"]
    assert events[0]["details"]["payload"] == "48 40 64"
    assert events[1]["details"]["error"] == "truncated_payload"


def test_decode_failures_recorded_at_default_level():
    settings = DecoderSettings()
    decode(DeviceModel.BOT, PAYLOADS[DeviceModel.BOT], settings=settings)
    ring = get_ring_buffer(logging.getLogger("switchlink.parsing.dispatch"))
    ring.clear()

    decode(DeviceModel.BOT, PAYLOADS[DeviceModel.BOT], settings=settings)
    with pytest.raises(TruncatedPayload):
        decode(DeviceModel.METER, b"\x54", settings=settings)

    events = ring.get_events()
    assert [e["event"] for e in events] == ["decode_failed"]
    assert events[0]["level"] == "INFO"
    assert events[0]["details"]["model"] == "METER"
