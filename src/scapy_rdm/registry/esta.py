"""Built-in ESTA (E1.20) standard namespace for the core parameters."""
from __future__ import annotations

from typing import Iterable, Tuple

from ..layers import params as pd
from .descriptor import ParameterDescriptor, SubDeviceValidator
from .pid_store import ManufacturerStores, NamespaceStore, RootRegistry

__all__ = ["ESTA_PIDS", "default_registry", "esta_store"]

_ROOT = SubDeviceValidator.ROOT_DEVICE_ONLY
_ANY = SubDeviceValidator.ANY_SUB_DEVICE
_NON_BROADCAST = SubDeviceValidator.NON_BROADCAST_SUB_DEVICE


def _get_only(name: str, value: int, response) -> ParameterDescriptor:
    return ParameterDescriptor(
        name=name,
        value=value,
        get_request=pd.EmptyPayload,
        get_response=response,
        get_validator=_NON_BROADCAST,
        set_validator=_ROOT,
    )


def _get_set(name: str, value: int, get_response, set_request) -> ParameterDescriptor:
    return ParameterDescriptor(
        name=name,
        value=value,
        get_request=pd.EmptyPayload,
        get_response=get_response,
        set_request=set_request,
        set_response=pd.EmptyPayload,
        get_validator=_NON_BROADCAST,
        set_validator=_ANY,
    )


ESTA_PIDS: Tuple[ParameterDescriptor, ...] = (
    _get_only("SUPPORTED_PARAMETERS", 0x0050, pd.SupportedParameters),
    _get_only("DEVICE_INFO", 0x0060, pd.DeviceInfo),
    _get_only("PRODUCT_DETAIL_ID_LIST", 0x0070, pd.ProductDetailIdList),
    _get_only("DEVICE_MODEL_DESCRIPTION", 0x0080, pd.Label),
    _get_only("MANUFACTURER_LABEL", 0x0081, pd.Label),
    _get_set("DEVICE_LABEL", 0x0082, pd.Label, pd.Label),
    _get_only("SOFTWARE_VERSION_LABEL", 0x00C0, pd.Label),
    _get_set("DMX_PERSONALITY", 0x00E0, pd.DmxPersonality, pd.DmxPersonalitySet),
    _get_set("DMX_START_ADDRESS", 0x00F0, pd.DmxStartAddress, pd.DmxStartAddress),
    ParameterDescriptor(
        name="SENSOR_VALUE",
        value=0x0201,
        get_request=pd.SensorRequest,
        get_response=pd.SensorValue,
        set_request=pd.SensorRequest,
        set_response=pd.SensorValue,
        get_validator=_NON_BROADCAST,
        set_validator=_ANY,
    ),
    _get_set("IDENTIFY_DEVICE", 0x1000, pd.IdentifyDevice, pd.IdentifyDevice),
    ParameterDescriptor(
        name="RESET_DEVICE",
        value=0x1001,
        set_request=pd.ResetDevice,
        set_response=pd.EmptyPayload,
        get_validator=_ROOT,
        set_validator=_ANY,
    ),
)


def esta_store(extra: Iterable[ParameterDescriptor] = ()) -> NamespaceStore:
    """Return a store of the built-in standard PIDs.

    Descriptors in ``extra`` are applied after the built-in ones and replace
    any built-in PID with the same value or name.
    """

    return NamespaceStore((*ESTA_PIDS, *extra))


def default_registry(
    manufacturer_stores: ManufacturerStores = (),
    *,
    version: int = 0,
) -> RootRegistry:
    """Return a registry backed by the built-in standard namespace."""

    return RootRegistry(esta_store(), manufacturer_stores, version=version)
