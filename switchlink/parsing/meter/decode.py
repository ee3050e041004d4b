"""
Decoder for SwitchBot Meter and Meter Plus service data.

Both models share the same six leading bytes::

    [model] [reserved] [battery] [tenths] [sign|degrees] [F|humidity]

Meter Plus advertisements may append a two byte big-endian CO2 reading
at bytes 6-7. That placement is assumed rather than taken from a capture:
the only known CO2 field sits in the manufacturer data of a different
model. The extension is decoded on top of the shared reading rather than by a
separate layout, and its absence is not an error.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from switchlink import const
from switchlink.core.binary import (
    read_flag,
    read_percentage,
    read_signed_temperature,
    read_uint16_be,
    require_length,
)


@dataclass(frozen=True)
class MeterState:
    """
    Decoded temperature/humidity reading.

    Attributes:
        temperature: Degrees Celsius with one decimal digit.
        humidity: Relative humidity in percent.
        battery: Battery level in percent.
        fahrenheit: Whether the device display is set to Fahrenheit. This
            only affects the display; ``temperature`` is always Celsius.
    """
    temperature: float
    humidity: int
    battery: int
    fahrenheit: bool = False

    @property
    def temperature_fahrenheit(self) -> float:
        return round(self.temperature * 9 / 5 + 32, 1)

    def as_dict(self) -> dict[str, Any]:
        return {
            "temperature": self.temperature,
            "humidity": self.humidity,
            "battery": self.battery,
            "fahrenheit": self.fahrenheit,
        }


@dataclass(frozen=True)
class MeterPlusState:
    """A Meter Plus reading: the shared meter fields plus the extension bytes."""
    reading: MeterState
    co2_ppm: int

    @property
    def temperature(self) -> float:
        return self.reading.temperature

    @property
    def humidity(self) -> int:
        return self.reading.humidity

    @property
    def battery(self) -> int:
        return self.reading.battery

    @property
    def fahrenheit(self) -> bool:
        return self.reading.fahrenheit

    def as_dict(self) -> dict[str, Any]:
        return {**self.reading.as_dict(), "co2_ppm": self.co2_ppm}


def decode_meter(data: bytes) -> MeterState:
    require_length(data, const.METER_MIN_LENGTH, "meter")
    return MeterState(
        temperature=read_signed_temperature(data, const.METER_FRACTION_INDEX, const.METER_TEMPERATURE_INDEX),
        humidity=read_percentage(data, const.METER_HUMIDITY_INDEX, const.PERCENT_MASK),
        battery=read_percentage(data, const.METER_BATTERY_INDEX, const.PERCENT_MASK),
        fahrenheit=read_flag(data, const.METER_HUMIDITY_INDEX, const.METER_FAHRENHEIT_BIT),
    )


def decode_meter_plus(data: bytes) -> Union[MeterState, MeterPlusState]:
    """
    Decode a Meter Plus payload.

    Args:
        data: Service data of at least six bytes.

    Returns:
        A ``MeterPlusState`` when the payload carries the extension bytes,
        otherwise the plain ``MeterState``.
    """
    reading = decode_meter(data)
    if len(data) < const.METER_PLUS_EXTENDED_LENGTH:
        return reading
    return MeterPlusState(reading=reading, co2_ppm=read_uint16_be(data, const.METER_PLUS_CO2_INDEX))
