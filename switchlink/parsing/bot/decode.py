"""
Decoder for SwitchBot Bot service data.

Layout: ``[model] [flags] [battery]`` where bit 7 of ``flags`` selects
switch mode and bit 6 carries the on/off state.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from switchlink import const
from switchlink.core.binary import read_flag, read_mode_enum, read_percentage, require_length


class BotMode(str, Enum):
    PRESS = "press"
    SWITCH = "switch"


_MODES: dict[int, BotMode] = {
    0x00: BotMode.PRESS,
    const.BOT_MODE_MASK: BotMode.SWITCH,
}


@dataclass(frozen=True)
class BotState:
    """
    Decoded Bot advertisement.

    Attributes:
        mode: Press mode (momentary actuation) or switch mode (latching).
        is_on: The on/off bit. In press mode this is the last actuation, not
            a stable position; see ``state_is_authoritative``.
        battery: Battery level in percent.
    """
    mode: BotMode
    is_on: bool
    battery: int

    @property
    def state_is_authoritative(self) -> bool:
        return self.mode is BotMode.SWITCH

    def as_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "is_on": self.is_on,
            "battery": self.battery,
            "state_is_authoritative": self.state_is_authoritative,
        }


def decode_bot(data: bytes) -> BotState:
    require_length(data, const.BOT_MIN_LENGTH, "bot")
    return BotState(
        mode=read_mode_enum(data, const.BOT_FLAGS_INDEX, const.BOT_MODE_MASK, _MODES, field="bot mode"),
        is_on=read_flag(data, const.BOT_FLAGS_INDEX, const.BOT_STATE_BIT),
        battery=read_percentage(data, const.BOT_BATTERY_INDEX, const.PERCENT_MASK),
    )
