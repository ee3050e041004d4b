"""
Bot (button pusher) advertisement decoding.
"""
from switchlink.parsing.bot.decode import BotMode, BotState, decode_bot

__all__ = ["BotMode", "BotState", "decode_bot"]
