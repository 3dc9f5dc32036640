"""Shared contracts: domain records, enumerations and errors.

These types answer: "What does a generated sample look like?"
"""

from astarte_generators.contracts.enums import (
    Aggregation,
    DatabaseRetentionPolicy,
    InterfaceType,
    MappingType,
    Ownership,
    Reliability,
    Retention,
)
from astarte_generators.contracts.errors import (
    AstarteGeneratorsError,
    InvalidDeviceIdError,
    NestedOverrideConflictError,
    OverrideShapeError,
)
from astarte_generators.contracts.identity import decode_device_id, encode_device_id
from astarte_generators.contracts.records import Device, Interface, InterfaceKey, Mapping

__all__ = [
    "Aggregation",
    "AstarteGeneratorsError",
    "DatabaseRetentionPolicy",
    "Device",
    "Interface",
    "InterfaceKey",
    "InterfaceType",
    "InvalidDeviceIdError",
    "Mapping",
    "MappingType",
    "NestedOverrideConflictError",
    "OverrideShapeError",
    "Ownership",
    "Reliability",
    "Retention",
    "decode_device_id",
    "encode_device_id",
]
