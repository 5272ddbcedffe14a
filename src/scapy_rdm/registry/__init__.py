"""PID registry: descriptors, namespace stores and the root registry."""

from .descriptor import (
    ALL_SUB_DEVICES,
    MAX_SUB_DEVICE_NUMBER,
    ParameterDescriptor,
    SubDeviceValidator,
    order_by_name,
    sorted_by_name,
    sub_device_valid,
)
from .esta import ESTA_PIDS, default_registry, esta_store
from .pid_store import NamespaceStore, RootRegistry

__all__ = [
    "ALL_SUB_DEVICES",
    "ESTA_PIDS",
    "MAX_SUB_DEVICE_NUMBER",
    "NamespaceStore",
    "ParameterDescriptor",
    "RootRegistry",
    "SubDeviceValidator",
    "default_registry",
    "esta_store",
    "order_by_name",
    "sorted_by_name",
    "sub_device_valid",
]
