"""Parameter descriptors and the sub-device addressing rules for RDM PIDs."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable, List, Optional

__all__ = [
    "ALL_SUB_DEVICES",
    "MAX_SUB_DEVICE_NUMBER",
    "ParameterDescriptor",
    "SubDeviceValidator",
    "order_by_name",
    "sorted_by_name",
    "sub_device_valid",
]

ALL_SUB_DEVICES = 0xFFFF
MAX_SUB_DEVICE_NUMBER = 0x200


class SubDeviceValidator(IntEnum):
    """Which sub-devices a GET or SET for a parameter may address."""

    ROOT_DEVICE_ONLY = 0  # 0 only
    ANY_SUB_DEVICE = 1  # 0 - 512 or ALL_SUB_DEVICES
    NON_BROADCAST_SUB_DEVICE = 2  # 0 - 512
    SPECIFIC_SUB_DEVICE = 3  # 1 - 512


def sub_device_valid(validator: SubDeviceValidator | int | str, sub_device: int) -> bool:
    """Return True when ``sub_device`` may be addressed under ``validator``.

    ``validator`` may be a :class:`SubDeviceValidator`, its integer value or its
    name. Unknown tags and non-integer sub-devices are never valid.
    """

    if not _is_int(sub_device):
        return False
    try:
        validator = _coerce_validator(validator)
    except ValueError:
        return False
    if validator is SubDeviceValidator.ROOT_DEVICE_ONLY:
        return sub_device == 0
    if validator is SubDeviceValidator.ANY_SUB_DEVICE:
        return 0 <= sub_device <= MAX_SUB_DEVICE_NUMBER or sub_device == ALL_SUB_DEVICES
    if validator is SubDeviceValidator.NON_BROADCAST_SUB_DEVICE:
        return 0 <= sub_device <= MAX_SUB_DEVICE_NUMBER
    if validator is SubDeviceValidator.SPECIFIC_SUB_DEVICE:
        return 0 < sub_device <= MAX_SUB_DEVICE_NUMBER
    return False


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    """Describes one RDM parameter (PID).

    Attributes:
        name: Parameter name, unique within its namespace.
        value: 16-bit parameter identifier.
        get_request: Payload shape of a GET request, ``None`` if GET is unsupported.
        get_response: Payload shape of a GET response.
        set_request: Payload shape of a SET request, ``None`` if SET is unsupported.
        set_response: Payload shape of a SET response.
        get_validator: Sub-devices a GET may address.
        set_validator: Sub-devices a SET may address.

    Payload shapes are held by reference and never inspected here.
    """

    name: str
    value: int
    get_request: Optional[Any] = None
    get_response: Optional[Any] = None
    set_request: Optional[Any] = None
    set_response: Optional[Any] = None
    get_validator: SubDeviceValidator = SubDeviceValidator.ROOT_DEVICE_ONLY
    set_validator: SubDeviceValidator = SubDeviceValidator.ROOT_DEVICE_ONLY

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("PID name must be a non-empty string")
        if not _is_int(self.value):
            raise ValueError(f"PID value {self.value!r} must be an integer")
        if not 0 <= self.value <= 0xFFFF:
            raise ValueError(f"PID value {self.value:#x} must fit in 16 bits")
        # frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "get_validator", _coerce_validator(self.get_validator))
        object.__setattr__(self, "set_validator", _coerce_validator(self.set_validator))

    def is_get_valid(self, sub_device: int) -> bool:
        """Return True if a GET may target ``sub_device``."""

        return sub_device_valid(self.get_validator, sub_device)

    def is_set_valid(self, sub_device: int) -> bool:
        """Return True if a SET may target ``sub_device``."""

        return sub_device_valid(self.set_validator, sub_device)

    @property
    def sort_key(self) -> tuple[str, int]:
        return (self.name, self.value)

    def __repr__(self) -> str:
        return f"ParameterDescriptor(name={self.name!r}, value={self.value:#06x})"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _coerce_validator(tag: Any) -> SubDeviceValidator:
    if isinstance(tag, SubDeviceValidator):
        return tag
    if isinstance(tag, str):
        try:
            return SubDeviceValidator[tag]
        except KeyError:
            raise ValueError(f"Unknown sub-device validator {tag!r}") from None
    try:
        return SubDeviceValidator(tag)
    except ValueError:
        raise ValueError(f"Unknown sub-device validator {tag!r}") from None


def order_by_name(a: ParameterDescriptor, b: ParameterDescriptor) -> bool:
    """Return True when ``a`` sorts before ``b``.

    Names decide the order; the PID value breaks ties between namespaces.
    """

    return a.sort_key < b.sort_key


def sorted_by_name(descriptors: Iterable[ParameterDescriptor]) -> List[ParameterDescriptor]:
    """Return ``descriptors`` as a list ordered by name."""

    return sorted(descriptors, key=lambda descriptor: descriptor.sort_key)
