"""
Plug Mini (US and JP) advertisement decoding.
"""
from switchlink.parsing.plug.decode import PlugMiniState, decode_plug_mini

__all__ = ["PlugMiniState", "decode_plug_mini"]
