from switchlink.domain import DeviceModel, resolve_model
from switchlink.errors import DecodeError, InvalidEncoding, TruncatedPayload, UnknownMode, UnsupportedDeviceType
from switchlink.parsing.advertisement import AdvertisementSnapshot, decode_advertisement
from switchlink.parsing.bot import BotMode, BotState
from switchlink.parsing.dispatch import DecodedState, decode, minimum_length
from switchlink.parsing.humidifier import HumidifierLevel, HumidifierState
from switchlink.parsing.meter import MeterPlusState, MeterState
from switchlink.parsing.plug import PlugMiniState
from switchlink.settings import DecoderSettings, get_settings
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "decode",
    "decode_advertisement",
    "minimum_length",
    "resolve_model",
    "DeviceModel",
    "DecodedState",
    "AdvertisementSnapshot",
    "BotMode",
    "BotState",
    "MeterState",
    "MeterPlusState",
    "HumidifierLevel",
    "HumidifierState",
    "PlugMiniState",
    "DecodeError",
    "TruncatedPayload",
    "UnsupportedDeviceType",
    "UnknownMode",
    "InvalidEncoding",
    "DecoderSettings",
    "get_settings",
]

try:
    __version__ = version("switchlink")
except PackageNotFoundError:
    __version__ = "0.0.0"
