"""
This package defines the device model catalog: the SwitchBot model bytes,
their display names and which decoder family handles each of them.
"""
from switchlink.domain.models import (
    DeviceFamily,
    DeviceModel,
    ModelInfo,
    SUPPORTED_MODELS,
    all_models,
    model_info,
    resolve_model,
)

__all__ = ["DeviceFamily", "DeviceModel", "ModelInfo", "SUPPORTED_MODELS", "all_models", "model_info", "resolve_model"]
