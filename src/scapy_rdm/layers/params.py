"""Scapy layouts for the parameter data of core E1.20 PIDs."""
from __future__ import annotations

from scapy.fields import (
    ByteField,
    FieldListField,
    IntField,
    ShortField,
    SignedShortField,
    StrField,
)
from scapy.packet import Packet

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

MAX_LABEL_LENGTH = 32


class LabelField(StrField):
    """ASCII label field limited to :data:`MAX_LABEL_LENGTH` bytes."""

    def addfield(self, pkt, s: bytes, val) -> bytes:  # type: ignore[override]
        raw = self.i2m(pkt, val)
        if len(raw) > MAX_LABEL_LENGTH:
            raise ValueError(f"label of {len(raw)} bytes exceeds {MAX_LABEL_LENGTH}")
        return s + raw


class _ParameterData(Packet):
    """Base packet for RDM parameter data; nothing follows it on the wire."""

    def extract_padding(self, s: bytes) -> tuple[bytes, bytes]:  # pragma: no cover - scapy API hook
        return b"", s


class EmptyPayload(_ParameterData):
    name = "RDM Empty Parameter Data"
    fields_desc = []


class SupportedParameters(_ParameterData):
    name = "RDM SUPPORTED_PARAMETERS"
    fields_desc = [
        FieldListField("pids", [], ShortField("pid", 0)),
    ]


class DeviceInfo(_ParameterData):
    """DEVICE_INFO response, 19 bytes."""

    name = "RDM DEVICE_INFO"
    fields_desc = [
        ShortField("protocol_version", 0x0100),
        ShortField("device_model", 0),
        ShortField("product_category", 0),
        IntField("software_version", 0),
        ShortField("dmx_footprint", 0),
        ByteField("current_personality", 1),
        ByteField("personality_count", 1),
        ShortField("dmx_start_address", 0xFFFF),
        ShortField("sub_device_count", 0),
        ByteField("sensor_count", 0),
    ]


class ProductDetailIdList(_ParameterData):
    name = "RDM PRODUCT_DETAIL_ID_LIST"
    fields_desc = [
        FieldListField("product_details", [], ShortField("detail", 0)),
    ]


class Label(_ParameterData):
    """Free-form ASCII label of at most 32 bytes."""

    name = "RDM Label"
    fields_desc = [
        LabelField("label", b""),
    ]


class DmxPersonality(_ParameterData):
    name = "RDM DMX_PERSONALITY"
    fields_desc = [
        ByteField("current_personality", 1),
        ByteField("personality_count", 1),
    ]


class DmxPersonalitySet(_ParameterData):
    name = "RDM DMX_PERSONALITY set"
    fields_desc = [
        ByteField("personality", 1),
    ]


class DmxStartAddress(_ParameterData):
    name = "RDM DMX_START_ADDRESS"
    fields_desc = [
        ShortField("dmx_address", 1),
    ]


class SensorRequest(_ParameterData):
    name = "RDM Sensor Request"
    fields_desc = [
        ByteField("sensor_number", 0),
    ]


class SensorValue(_ParameterData):
    name = "RDM SENSOR_VALUE"
    fields_desc = [
        ByteField("sensor_number", 0),
        SignedShortField("present_value", 0),
        SignedShortField("lowest_detected", 0),
        SignedShortField("highest_detected", 0),
        SignedShortField("recorded_value", 0),
    ]


class IdentifyDevice(_ParameterData):
    name = "RDM IDENTIFY_DEVICE"
    fields_desc = [
        ByteField("identify", 0),
    ]


class ResetDevice(_ParameterData):
    name = "RDM RESET_DEVICE"
    fields_desc = [
        ByteField("reset_type", 0x01),  # 0x01 warm, 0xFF cold
    ]
