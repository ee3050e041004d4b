"""
Model catalog for SwitchBot BLE devices.

Every SwitchBot advertisement starts its service data with a model byte.
This module maps those bytes to ``DeviceModel`` members, human-readable
names and the decoder family that understands the payload. Only four
families have decoders; the remaining models are catalogued so that
callers can recognise them and report them as unsupported.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from switchlink.const import MODEL_BYTE_MASK


class DeviceModel(IntEnum):
    """Model bytes advertised in the first byte of the service data."""
    BUTTON = 0x42
    FAN_ADD = 0x46
    BOT = 0x48
    HUB_ADD = 0x4C
    HUB_MINI_ADD = 0x4D
    HUB_PLUS_ADD = 0x50
    METER = 0x54
    CURTAIN = 0x63
    CONTACT_SENSOR = 0x64
    HUMIDIFIER = 0x65
    FAN = 0x66
    PLUG_MINI_US = 0x67
    METER_PLUS = 0x69
    PLUG_MINI_JP = 0x6A
    HUB = 0x6C
    HUB_MINI = 0x6D
    SMART_LOCK = 0x6F
    HUB_PLUS = 0x70
    LED_STRIP_LIGHT = 0x72
    MOTION_SENSOR = 0x73
    METER_ADD = 0x74
    COLOR_BULB = 0x75


class DeviceFamily(str, Enum):
    """Payload layouts understood by the decoders."""
    BOT = "bot"
    METER = "meter"
    HUMIDIFIER = "humidifier"
    PLUG_MINI = "plug_mini"


@dataclass(frozen=True)
class ModelInfo:
    """
    Metadata for a single SwitchBot model.

    Attributes:
        model: The model enum member.
        display_name: Human-readable name.
        family: The decoder family, or ``None`` if no decoder exists.
        uses_manufacturer_data: Whether the sensor payload is carried in the
            manufacturer data rather than the service data.
    """
    model: DeviceModel
    display_name: str
    family: Optional[DeviceFamily] = None
    uses_manufacturer_data: bool = False

    @property
    def supported(self) -> bool:
        return self.family is not None


DISPLAY_NAMES: dict[DeviceModel, str] = {
    DeviceModel.BUTTON: "Button",
    DeviceModel.FAN_ADD: "Fan (add mode)",
    DeviceModel.BOT: "Bot",
    DeviceModel.HUB_ADD: "Hub (add mode)",
    DeviceModel.HUB_MINI_ADD: "Hub Mini (add mode)",
    DeviceModel.HUB_PLUS_ADD: "Hub Plus (add mode)",
    DeviceModel.METER: "Meter",
    DeviceModel.CURTAIN: "Curtain",
    DeviceModel.CONTACT_SENSOR: "Contact Sensor",
    DeviceModel.HUMIDIFIER: "Humidifier",
    DeviceModel.FAN: "Fan",
    DeviceModel.PLUG_MINI_US: "Plug Mini (US)",
    DeviceModel.METER_PLUS: "Meter Plus",
    DeviceModel.PLUG_MINI_JP: "Plug Mini (JP)",
    DeviceModel.HUB: "Hub",
    DeviceModel.HUB_MINI: "Hub Mini",
    DeviceModel.SMART_LOCK: "Smart Lock",
    DeviceModel.HUB_PLUS: "Hub Plus",
    DeviceModel.LED_STRIP_LIGHT: "LED Strip Light",
    DeviceModel.MOTION_SENSOR: "Motion Sensor",
    DeviceModel.METER_ADD: "Meter (add mode)",
    DeviceModel.COLOR_BULB: "Color Bulb",
}

_FAMILIES: dict[DeviceModel, DeviceFamily] = {
    DeviceModel.BOT: DeviceFamily.BOT,
    DeviceModel.METER: DeviceFamily.METER,
    DeviceModel.METER_PLUS: DeviceFamily.METER,
    DeviceModel.HUMIDIFIER: DeviceFamily.HUMIDIFIER,
    DeviceModel.PLUG_MINI_US: DeviceFamily.PLUG_MINI,
    DeviceModel.PLUG_MINI_JP: DeviceFamily.PLUG_MINI,
}

SUPPORTED_MODELS: frozenset[DeviceModel] = frozenset(_FAMILIES)


def _build_catalog() -> dict[DeviceModel, ModelInfo]:
    catalog: dict[DeviceModel, ModelInfo] = {}
    for model in DeviceModel:
        family = _FAMILIES.get(model)
        catalog[model] = ModelInfo(
            model=model,
            display_name=DISPLAY_NAMES.get(model, model.name.replace("_", " ").title()),
            family=family,
            uses_manufacturer_data=family is DeviceFamily.PLUG_MINI,
        )
    return catalog


_CATALOG: dict[DeviceModel, ModelInfo] = _build_catalog()


def resolve_model(model_byte: int) -> Optional[DeviceModel]:
    """
    Map a raw model byte to a ``DeviceModel``.

    Bit 7 is ignored. A match does not prove the advertisement came from a
    SwitchBot device: a single byte collides easily with other vendors, so
    callers should confirm the service UUID or company id before trusting
    the decoded values.

    Args:
        model_byte: The first byte of the service data.

    Returns:
        The matching ``DeviceModel``, or ``None`` for unknown bytes.
    """
    if not 0 <= model_byte <= 0xFF:
        return None
    try:
        return DeviceModel(model_byte & MODEL_BYTE_MASK)
    except ValueError:
        return None


def model_info(model: DeviceModel) -> ModelInfo:
    return _CATALOG[model]


def all_models() -> list[ModelInfo]:
    """Return every catalogued model sorted by model byte."""
    return sorted(_CATALOG.values(), key=lambda info: info.model.value)
