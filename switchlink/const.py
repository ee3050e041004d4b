"""
Constants for SwitchBot BLE advertisement decoding.

These values are plain data and are safe to import from scanning code that
wants to build its own filters (company ids, service data UUIDs, model
bytes) without pulling in the decoders.
"""
from __future__ import annotations

# Bluetooth SIG company identifiers seen in SwitchBot manufacturer data.
# Woan Technology owns 0x0969, but some models advertise Nordic's 0x0059.
WOAN_MANUFACTURER_ID = 0x0969
NORDIC_MANUFACTURER_ID = 0x0059

# Service data UUIDs carrying the model byte and the sensor payload.
SERVICE_DATA_UUID_WOAN = "0000fd3d-0000-1000-8000-00805f9b34fb"
SERVICE_DATA_UUID_LEGACY = "00000d00-0000-1000-8000-00805f9b34fb"

# GATT primary service and characteristics (not used by the decoders).
PRIMARY_SERVICE_UUID = "cba20d00-224d-11e6-9fb8-0002a5d5c51b"
CHAR_UUID_WRITE = "cba20002-224d-11e6-9fb8-0002a5d5c51b"
CHAR_UUID_NOTIFY = "cba20003-224d-11e6-9fb8-0002a5d5c51b"

# Bit 7 of the model byte is a pairing flag; the model id is the low 7 bits.
MODEL_BYTE_MASK = 0x7F

# Model bytes for the supported families.
MODEL_BOT = 0x48
MODEL_METER = 0x54
MODEL_HUMIDIFIER = 0x65
MODEL_PLUG_MINI_US = 0x67
MODEL_METER_PLUS = 0x69
MODEL_PLUG_MINI_JP = 0x6A

# Minimum payload lengths. The plug length counts manufacturer data with
# the two company id bytes already stripped.
BOT_MIN_LENGTH = 3
METER_MIN_LENGTH = 6
METER_PLUS_EXTENDED_LENGTH = 8
HUMIDIFIER_MIN_LENGTH = 5
PLUG_MINI_MIN_LENGTH = 12

# Shared masks.
PERCENT_MASK = 0b01111111
HIGH_BIT = 7

# Bot: byte 1 carries mode and state, byte 2 battery.
BOT_FLAGS_INDEX = 1
BOT_MODE_MASK = 0b10000000
BOT_STATE_BIT = 6
BOT_BATTERY_INDEX = 2

# Meter: battery, tenths, signed integer, humidity.
METER_BATTERY_INDEX = 2
METER_FRACTION_INDEX = 3
METER_FRACTION_MASK = 0b00001111
METER_TEMPERATURE_INDEX = 4
METER_TEMPERATURE_MASK = 0b01111111
METER_HUMIDITY_INDEX = 5
METER_FAHRENHEIT_BIT = 7
METER_PLUS_CO2_INDEX = 6

# Humidifier: power flag in byte 1, auto flag and setting in byte 4.
HUMIDIFIER_STATE_INDEX = 1
HUMIDIFIER_SETTING_INDEX = 4
HUMIDIFIER_SETTING_MASK = 0b01111111

# Plug Mini (manufacturer data offsets).
PLUG_STATE_INDEX = 7
PLUG_STATE_MASK = 0xFF
PLUG_TIMER_INDEX = 8
PLUG_DELAY_BIT = 0
PLUG_TIMER_BIT = 1
PLUG_SYNC_UTC_BIT = 2
PLUG_RSSI_INDEX = 9
PLUG_POWER_INDEX = 10
PLUG_POWER_MASK = 0x7FFF
PLUG_POWER_DIVISOR = 10
