"""Scapy helpers for the RDM (ANSI E1.20) parameter registry.

The :mod:`scapy_rdm.registry` package resolves parameter ids (PIDs) across the
ESTA standard namespace and manufacturer-specific namespaces, and decides which
sub-devices a GET or SET may address. :mod:`scapy_rdm.layers` holds Scapy
layouts for the parameter data of the core standard PIDs.
"""
from __future__ import annotations

__version__ = "0.1.0"

from . import layers, registry
from .registry import *  # noqa: F401,F403

__all__ = [
    "layers",
    "registry",
    *registry.__all__,
]
