"""Tests for the Bot decoder."""
import pytest

from switchlink.errors import TruncatedPayload
from switchlink.parsing.bot import BotMode, BotState, decode_bot


def test_press_mode_on_full_battery():
    state = decode_bot(bytes([0x48, 0x40, 0x64]))
    assert state == BotState(mode=BotMode.PRESS, is_on=True, battery=100)
    assert state.state_is_authoritative is False


def test_press_mode_off_half_battery():
    state = decode_bot(bytes([0x48, 0x00, 0x32]))
    assert state.is_on is False
    assert state.battery == 50


def test_switch_mode_is_authoritative():
    state = decode_bot(bytes([0x48, 0xC0, 0x57]))
    assert state.mode is BotMode.SWITCH
    assert state.is_on is True
    assert state.state_is_authoritative is True


def test_battery_high_bit_ignored():
    state = decode_bot(bytes([0x48, 0x00, 0xE4]))
    assert state.battery == 100


def test_reserved_flag_bits_do_not_leak():
    state = decode_bot(bytes([0x48, 0x3F, 0x10]))
    assert state.mode is BotMode.PRESS
    assert state.is_on is False
    assert state.battery == 16


def test_trailing_bytes_ignored():
    assert decode_bot(bytes([0x48, 0x40, 0x64, 0xFF])) == decode_bot(bytes([0x48, 0x40, 0x64]))


def test_truncated():
    with pytest.raises(TruncatedPayload):
        decode_bot(bytes([0x48, 0x40]))


def test_as_dict():
    assert decode_bot(bytes([0x48, 0xC0, 0x57])).as_dict() == {
        "mode": "switch",
        "is_on": True,
        "battery": 87,
        "state_is_authoritative": True,
    }
