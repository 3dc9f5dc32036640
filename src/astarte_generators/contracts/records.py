"""Generated domain records.

Every record is a frozen dataclass owned by the sample that produced it.
Derived fields (``Device.encoded_id``, ``Device.connected`` and the totals)
are computed once from the resolved fields when the record is assembled.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from ipaddress import IPv4Address

from astarte_generators.contracts.enums import (
    Aggregation,
    DatabaseRetentionPolicy,
    InterfaceType,
    MappingType,
    Ownership,
    Reliability,
    Retention,
)

# (name, major_version) identifies an interface within a device
type InterfaceKey = tuple[str, int]


@dataclass(frozen=True, slots=True)
class Mapping:
    """A single endpoint of an interface."""

    endpoint: str
    value_type: MappingType
    reliability: Reliability
    retention: Retention | None
    expiry: int
    explicit_timestamp: bool
    allow_unset: bool
    database_retention_policy: DatabaseRetentionPolicy | None = None
    database_retention_ttl: int | None = None
    description: str | None = None
    doc: str | None = None


@dataclass(frozen=True, slots=True)
class Interface:
    """An Astarte interface with its mappings.

    The ``interface_*`` and ``version_*`` properties mirror the column
    names used by the Astarte database layer.
    """

    id: bytes
    name: str
    major_version: int
    minor_version: int
    type: InterfaceType
    ownership: Ownership
    aggregation: Aggregation
    mappings: tuple[Mapping, ...]
    description: str | None = None
    doc: str | None = None

    @property
    def key(self) -> InterfaceKey:
        """Identity of the interface inside a device."""
        return (self.name, self.major_version)

    @property
    def interface_id(self) -> bytes:
        return self.id

    @property
    def interface_name(self) -> str:
        return self.name

    @property
    def version_major(self) -> int:
        return self.major_version

    @property
    def version_minor(self) -> int:
        return self.minor_version

    @property
    def interface_type(self) -> InterfaceType:
        return self.type


@dataclass(frozen=True, slots=True)
class Device:
    """A registered device and its traffic counters.

    Not hashable in practice: the counter and alias fields are dicts.
    """

    id: bytes
    encoded_id: str
    connected: bool
    first_registration: datetime
    first_credentials_request: datetime
    last_connection: datetime
    last_disconnection: datetime
    last_seen_ip: IPv4Address
    last_credentials_request_ip: IPv4Address
    inhibit_credentials_request: bool
    interfaces: tuple[Interface, ...]
    interfaces_msgs: dict[InterfaceKey, int]
    interfaces_bytes: dict[InterfaceKey, int]
    aliases: dict[str, str] | None
    attributes: dict[str, str] | None
    total_received_msgs: int
    total_received_bytes: int

    @property
    def device_id(self) -> bytes:
        return self.id
