"""
This package contains all modules related to decoding SwitchBot BLE
advertisement payloads.

Sub-packages handle specific device families:

- ``bot``: Bot mode, state and battery.
- ``meter``: Meter / Meter Plus temperature, humidity and battery.
- ``humidifier``: Humidifier power, auto mode and setting.
- ``plug``: Plug Mini power, overload and timer flags.
- ``advertisement``: Whole-advertisement decoding into snapshots.

``dispatch`` selects the family decoder for a device type tag.
"""
