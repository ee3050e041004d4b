"""
Meter and Meter Plus (thermo-hygrometer) advertisement decoding.
"""
from switchlink.parsing.meter.decode import MeterPlusState, MeterState, decode_meter, decode_meter_plus

__all__ = ["MeterPlusState", "MeterState", "decode_meter", "decode_meter_plus"]
