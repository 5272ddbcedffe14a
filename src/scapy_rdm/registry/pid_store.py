"""Namespace stores and the root registry used to resolve RDM PIDs.

A :class:`NamespaceStore` holds the parameters of one namespace, either the
ESTA standard namespace or the private namespace of a single manufacturer. A
:class:`RootRegistry` layers the standard namespace over the manufacturer
namespaces. Both are immutable once built and may be shared between threads
without locking.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from .descriptor import ParameterDescriptor

__all__ = ["NamespaceStore", "RootRegistry"]

logger = logging.getLogger(__name__)

ManufacturerStores = Union[Mapping[int, "NamespaceStore"], Iterable[Tuple[int, "NamespaceStore"]]]
ManufacturerBatches = Union[
    Mapping[int, Iterable[ParameterDescriptor]],
    Iterable[Tuple[int, Iterable[ParameterDescriptor]]],
]


class NamespaceStore:
    """Finalized set of parameter descriptors for a single namespace.

    Descriptors are indexed by value and by name. When two descriptors share a
    value or a name the one supplied later wins, and the earlier descriptor is
    dropped from both indexes.
    """

    __slots__ = ("_by_value", "_by_name")

    def __init__(self, descriptors: Iterable[ParameterDescriptor] = ()) -> None:
        self._by_value: Dict[int, ParameterDescriptor] = {}
        self._by_name: Dict[str, ParameterDescriptor] = {}
        for descriptor in descriptors:
            self._insert(descriptor)

    # ------------------------------------------------------------------ build
    def _insert(self, descriptor: ParameterDescriptor) -> None:
        for existing in (self._by_value.get(descriptor.value), self._by_name.get(descriptor.name)):
            if existing is not None and existing is not descriptor:
                logger.debug("Replacing %r with %r", existing, descriptor)
                self._evict(existing)
        self._by_value[descriptor.value] = descriptor
        self._by_name[descriptor.name] = descriptor

    def _evict(self, descriptor: ParameterDescriptor) -> None:
        if self._by_value.get(descriptor.value) is descriptor:
            del self._by_value[descriptor.value]
        if self._by_name.get(descriptor.name) is descriptor:
            del self._by_name[descriptor.name]

    # ------------------------------------------------------------------ queries
    def count(self) -> int:
        """Return the number of distinct PID values in the store."""

        return len(self._by_value)

    def all(self) -> Tuple[ParameterDescriptor, ...]:
        """Return every descriptor, ordered by PID value."""

        return tuple(self._by_value[value] for value in sorted(self._by_value))

    def lookup_by_value(self, value: int) -> Optional[ParameterDescriptor]:
        """Return the descriptor for ``value`` or ``None``."""

        if not isinstance(value, int):
            return None
        return self._by_value.get(value)

    def lookup_by_name(self, name: str) -> Optional[ParameterDescriptor]:
        """Return the descriptor named exactly ``name`` or ``None``."""

        if not isinstance(name, str):
            return None
        return self._by_name.get(name)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[ParameterDescriptor]:
        return iter(self.all())

    def __repr__(self) -> str:
        return f"NamespaceStore(count={self.count()})"


class RootRegistry:
    """Resolves PIDs across the standard and manufacturer namespaces.

    Unscoped lookups only search the standard namespace. Lookups scoped to a
    manufacturer search the standard namespace first and fall back to that
    manufacturer's namespace.
    """

    __slots__ = ("_standard_store", "_manufacturer_stores", "_version")

    def __init__(
        self,
        standard_store: Optional[NamespaceStore] = None,
        manufacturer_stores: ManufacturerStores = (),
        *,
        version: int = 0,
    ) -> None:
        if isinstance(version, bool) or not isinstance(version, int) or version < 0:
            raise ValueError("Registry version must be a non-negative integer")

        stores: Dict[int, NamespaceStore] = {}
        for manufacturer_id, store in _pairs(manufacturer_stores):
            _check_manufacturer_id(manufacturer_id)
            if manufacturer_id in stores:
                logger.debug("Replacing store for manufacturer %#06x", manufacturer_id)
            stores[manufacturer_id] = store

        self._standard_store = standard_store
        self._manufacturer_stores: Mapping[int, NamespaceStore] = MappingProxyType(stores)
        self._version = version
        logger.debug(
            "Built PID registry: %d standard PIDs, %d manufacturers, version %d",
            standard_store.count() if standard_store is not None else 0,
            len(stores),
            version,
        )

    @classmethod
    def from_batches(
        cls,
        standard_pids: Optional[Iterable[ParameterDescriptor]],
        manufacturer_pids: ManufacturerBatches = (),
        *,
        version: int = 0,
    ) -> "RootRegistry":
        """Build a registry from raw descriptor batches.

        ``standard_pids`` may be ``None`` when no standard definitions were
        loaded; the registry then has no standard store.
        """

        standard_store = NamespaceStore(standard_pids) if standard_pids is not None else None
        manufacturer_stores = [
            (manufacturer_id, NamespaceStore(descriptors))
            for manufacturer_id, descriptors in _pairs(manufacturer_pids)
        ]
        return cls(standard_store, manufacturer_stores, version=version)

    # ------------------------------------------------------------------ stores
    def version(self) -> int:
        """Return the data version; a higher number is more recent."""

        return self._version

    def standard_store(self) -> Optional[NamespaceStore]:
        return self._standard_store

    def manufacturer_store(self, manufacturer_id: int) -> Optional[NamespaceStore]:
        """Return the store for ``manufacturer_id`` or ``None`` if unregistered."""

        if not isinstance(manufacturer_id, int):
            return None
        return self._manufacturer_stores.get(manufacturer_id)

    def manufacturer_ids(self) -> Tuple[int, ...]:
        return tuple(sorted(self._manufacturer_stores))

    # ------------------------------------------------------------------ lookup
    def resolve(
        self,
        pid: Union[int, str],
        manufacturer_id: Optional[int] = None,
    ) -> Optional[ParameterDescriptor]:
        """Resolve a PID given by value or by name.

        Without ``manufacturer_id`` only the standard namespace is searched.
        With it, the manufacturer's namespace is searched when the standard
        namespace has no match.
        """

        descriptor = _lookup(self._standard_store, pid)
        if descriptor is not None or manufacturer_id is None:
            return descriptor
        return _lookup(self.manufacturer_store(manufacturer_id), pid)

    def __repr__(self) -> str:
        return (
            f"RootRegistry(standard={self._standard_store!r}, "
            f"manufacturers={list(self.manufacturer_ids())}, version={self._version})"
        )


def _lookup(store: Optional[NamespaceStore], pid: Union[int, str]) -> Optional[ParameterDescriptor]:
    if store is None:
        return None
    if isinstance(pid, str):
        descriptor = store.lookup_by_name(pid)
        canonical = pid.upper()
        if descriptor is None and canonical != pid:
            descriptor = store.lookup_by_name(canonical)
        return descriptor
    return store.lookup_by_value(pid)


def _pairs(items):
    if isinstance(items, Mapping):
        return items.items()
    return items


def _check_manufacturer_id(manufacturer_id: int) -> None:
    if not 0 <= manufacturer_id <= 0xFFFF:
        raise ValueError(f"Manufacturer id {manufacturer_id:#x} must fit in 16 bits")
