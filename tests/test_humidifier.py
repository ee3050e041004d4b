"""Tests for the Humidifier decoder."""
import pytest

from switchlink.errors import TruncatedPayload, UnknownMode
from switchlink.parsing.humidifier import HumidifierLevel, decode_humidifier


def test_auto_mode_reports_target_humidity():
    state = decode_humidifier(bytes([0x65, 0x80, 0x00, 0x00, 0xBC]))
    assert state.is_on is True
    assert state.auto_mode is True
    assert state.target_humidity == 60
    assert state.level is None
    assert state.percentage_or_level == 60


def test_manual_mode_reports_level():
    state = decode_humidifier(bytes([0x65, 0x80, 0x00, 0x00, 0x66]))
    assert state.auto_mode is False
    assert state.level is HumidifierLevel.MEDIUM
    assert state.target_humidity is None
    assert state.percentage_or_level is HumidifierLevel.MEDIUM


def test_setting_byte_interpretation_follows_auto_flag():
    # identical except for the auto bit in byte 4
    auto = decode_humidifier(bytes([0x65, 0x80, 0x00, 0x00, 0xE6]))
    manual = decode_humidifier(bytes([0x65, 0x80, 0x00, 0x00, 0x66]))
    assert auto.target_humidity == 100
    assert auto.level is None
    assert manual.level is HumidifierLevel.MEDIUM
    assert manual.target_humidity is None


@pytest.mark.parametrize(
    "code, level",
    [(0x65, HumidifierLevel.LOW), (0x66, HumidifierLevel.MEDIUM), (0x67, HumidifierLevel.HIGH)],
)
def test_manual_levels(code, level):
    assert decode_humidifier(bytes([0x65, 0x00, 0x00, 0x00, code])).level is level


def test_off():
    assert decode_humidifier(bytes([0x65, 0x00, 0x00, 0x00, 0xBC])).is_on is False


def test_unknown_manual_level():
    with pytest.raises(UnknownMode) as info:
        decode_humidifier(bytes([0x65, 0x80, 0x00, 0x00, 0x32]))
    assert info.value.value == 0x32


def test_truncated():
    with pytest.raises(TruncatedPayload):
        decode_humidifier(bytes([0x65, 0x80, 0x00, 0x00]))


def test_as_dict():
    assert decode_humidifier(bytes([0x65, 0x80, 0x00, 0x00, 0x67])).as_dict() == {
        "is_on": True,
        "auto_mode": False,
        "target_humidity": None,
        "level": "high",
    }
