"""Scapy layer definitions for RDM parameter data."""

from .params import (
    DeviceInfo,
    DmxPersonality,
    DmxPersonalitySet,
    DmxStartAddress,
    EmptyPayload,
    IdentifyDevice,
    Label,
    MAX_LABEL_LENGTH,
    ProductDetailIdList,
    ResetDevice,
    SensorRequest,
    SensorValue,
    SupportedParameters,
)

__all__ = [
    "DeviceInfo",
    "DmxPersonality",
    "DmxPersonalitySet",
    "DmxStartAddress",
    "EmptyPayload",
    "IdentifyDevice",
    "Label",
    "MAX_LABEL_LENGTH",
    "ProductDetailIdList",
    "ResetDevice",
    "SensorRequest",
    "SensorValue",
    "SupportedParameters",
]
