"""
Decoder for SwitchBot Plug Mini manufacturer data.

The plug does not put its state in the service data. The payload here is
the manufacturer data with the company id stripped::

    [mac x6] [seq] [state] [timer flags] [rssi] [overload|power hi] [power lo]

Power is reported in tenths of a watt.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from switchlink import const
from switchlink.core.binary import byte_at, read_fixed_point, read_flag, read_mode_enum, require_length
from switchlink.errors import InvalidEncoding

_STATES: dict[int, bool] = {
    0x00: False,
    0x80: True,
}


@dataclass(frozen=True)
class PlugMiniState:
    is_on: bool
    power: float
    overload: bool
    wifi_rssi: int
    delay: bool = False
    timer: bool = False
    sync_utc_time: bool = False

    def as_dict(self) -> dict[str, Any]:
        return {
            "is_on": self.is_on,
            "power": self.power,
            "overload": self.overload,
            "wifi_rssi": self.wifi_rssi,
            "delay": self.delay,
            "timer": self.timer,
            "sync_utc_time": self.sync_utc_time,
        }


def decode_plug_mini(data: bytes) -> PlugMiniState:
    require_length(data, const.PLUG_MINI_MIN_LENGTH, "plug_mini")
    power = read_fixed_point(data, const.PLUG_POWER_INDEX, const.PLUG_POWER_MASK, const.PLUG_POWER_DIVISOR)
    # Invariant guard: the 15-bit mask keeps power non-negative.
    if power < 0:
        raise InvalidEncoding("power", "negative power", power)
    return PlugMiniState(
        is_on=read_mode_enum(data, const.PLUG_STATE_INDEX, const.PLUG_STATE_MASK, _STATES, field="plug state"),
        power=power,
        overload=read_flag(data, const.PLUG_POWER_INDEX, const.HIGH_BIT),
        wifi_rssi=-byte_at(data, const.PLUG_RSSI_INDEX),
        delay=read_flag(data, const.PLUG_TIMER_INDEX, const.PLUG_DELAY_BIT),
        timer=read_flag(data, const.PLUG_TIMER_INDEX, const.PLUG_TIMER_BIT),
        sync_utc_time=read_flag(data, const.PLUG_TIMER_INDEX, const.PLUG_SYNC_UTC_BIT),
    )
