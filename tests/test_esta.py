"""Tests for the built-in standard namespace and its Scapy payload layouts."""

from scapy_rdm.layers import (
    MAX_LABEL_LENGTH,
    DeviceInfo,
    EmptyPayload,
    Label,
    SensorValue,
    SupportedParameters,
)
from scapy_rdm.registry import (
    ALL_SUB_DEVICES,
    ESTA_PIDS,
    NamespaceStore,
    ParameterDescriptor,
    default_registry,
    esta_store,
)


def test_esta_store_contents() -> None:
    store = esta_store()

    assert store.count() == len(ESTA_PIDS)
    assert store.lookup_by_name("DEVICE_INFO").value == 0x0060
    assert store.lookup_by_value(0x1000).name == "IDENTIFY_DEVICE"
    assert store.lookup_by_value(0x0060).get_response is DeviceInfo


def test_gets_are_never_broadcast() -> None:
    for pid in ESTA_PIDS:
        assert not pid.is_get_valid(ALL_SUB_DEVICES), pid.name


def test_identify_device_addressing() -> None:
    identify = esta_store().lookup_by_name("IDENTIFY_DEVICE")

    assert identify.is_get_valid(0)
    assert identify.is_get_valid(12)
    assert identify.is_set_valid(ALL_SUB_DEVICES)
    assert identify.set_request is not None


def test_reset_device_is_set_only() -> None:
    reset = esta_store().lookup_by_value(0x1001)

    assert reset.get_request is None
    assert reset.get_response is None
    assert reset.set_request is not None
    assert reset.set_response is EmptyPayload


def test_extra_descriptors_override_builtins() -> None:
    override = ParameterDescriptor("DEVICE_LABEL", 0x0082, get_request=EmptyPayload, get_response=Label)
    store = esta_store([override])

    assert store.lookup_by_value(0x0082) is override
    assert store.count() == len(ESTA_PIDS)


def test_default_registry() -> None:
    custom = ParameterDescriptor("CUSTOM_COLOR", 0x8010)
    registry = default_registry({0x7FF0: NamespaceStore([custom])}, version=2)

    assert registry.resolve("SUPPORTED_PARAMETERS").value == 0x0050
    assert registry.resolve(0x8010) is None
    assert registry.resolve(0x8010, 0x7FF0) is custom
    assert registry.version() == 2


def test_device_info_layout() -> None:
    info = DeviceInfo(device_model=0x0102, software_version=0x01020304, dmx_footprint=6, dmx_start_address=1)
    raw = bytes(info)

    assert len(raw) == 19
    assert raw[:2] == b"\x01\x00"
    assert raw[2:4] == b"\x01\x02"
    assert DeviceInfo(raw).software_version == 0x01020304


def test_variable_length_layouts() -> None:
    supported = SupportedParameters(b"\x00\x82\x10\x00")
    assert supported.pids == [0x0082, 0x1000]

    assert bytes(Label(label=b"stage left")) == b"stage left"
    assert bytes(EmptyPayload()) == b""
    assert len(bytes(SensorValue(sensor_number=1, present_value=-5))) == 9


def test_label_length_is_bounded() -> None:
    assert len(bytes(Label(label=b"x" * MAX_LABEL_LENGTH))) == MAX_LABEL_LENGTH

    try:
        bytes(Label(label=b"x" * (MAX_LABEL_LENGTH + 1)))
    except ValueError:
        return
    raise AssertionError("oversized label was encoded")
