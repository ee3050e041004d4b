"""
Humidifier advertisement decoding.
"""
from switchlink.parsing.humidifier.decode import LEVEL_CODES, HumidifierLevel, HumidifierState, decode_humidifier

__all__ = ["LEVEL_CODES", "HumidifierLevel", "HumidifierState", "decode_humidifier"]
