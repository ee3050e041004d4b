"""
Decoder for SwitchBot Humidifier service data.

Byte 4 changes meaning with its own top bit: in auto mode the low seven
bits are the target humidity, in manual mode they are a level code.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from switchlink import const
from switchlink.core.binary import read_flag, read_mode_enum, read_percentage, require_length


class HumidifierLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


LEVEL_CODES: dict[int, HumidifierLevel] = {
    101: HumidifierLevel.LOW,
    102: HumidifierLevel.MEDIUM,
    103: HumidifierLevel.HIGH,
}


@dataclass(frozen=True)
class HumidifierState:
    is_on: bool
    auto_mode: bool
    target_humidity: Optional[int] = None
    level: Optional[HumidifierLevel] = None

    @property
    def percentage_or_level(self) -> Union[int, HumidifierLevel, None]:
        return self.target_humidity if self.auto_mode else self.level

    def as_dict(self) -> dict[str, Any]:
        return {
            "is_on": self.is_on,
            "auto_mode": self.auto_mode,
            "target_humidity": self.target_humidity,
            "level": self.level.value if self.level else None,
        }


def decode_humidifier(data: bytes) -> HumidifierState:
    require_length(data, const.HUMIDIFIER_MIN_LENGTH, "humidifier")
    is_on = read_flag(data, const.HUMIDIFIER_STATE_INDEX, const.HIGH_BIT)
    auto_mode = read_flag(data, const.HUMIDIFIER_SETTING_INDEX, const.HIGH_BIT)
    if auto_mode:
        return HumidifierState(
            is_on=is_on,
            auto_mode=True,
            target_humidity=read_percentage(data, const.HUMIDIFIER_SETTING_INDEX, const.HUMIDIFIER_SETTING_MASK),
        )
    level = read_mode_enum(
        data,
        const.HUMIDIFIER_SETTING_INDEX,
        const.HUMIDIFIER_SETTING_MASK,
        LEVEL_CODES,
        field="humidifier level",
    )
    return HumidifierState(is_on=is_on, auto_mode=False, level=level)
