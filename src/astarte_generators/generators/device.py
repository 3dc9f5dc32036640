# src/astarte_generators/generators/device.py
"""Strategies for Astarte devices.

See https://docs.astarte-platform.org/astarte/latest/010-design_principles.html#device-id

Derived fields are never drawn: ``encoded_id`` encodes ``id``,
``connected`` compares the connection timestamps, and the totals are the
sums of the per-interface counters that were actually used.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping as MappingABC
from datetime import UTC, datetime
from typing import Any

from hypothesis import strategies as st

from astarte_generators.contracts.identity import DEVICE_ID_BYTES, encode_device_id
from astarte_generators.contracts.records import Device, Interface, InterfaceKey
from astarte_generators.core.config import GenerationConfig, get_config
from astarte_generators.core.logging import get_logger
from astarte_generators.generators.common import ipv4, string_map, timestamp
from astarte_generators.generators.interface import interface_from
from astarte_generators.generators.params import gen_param, optional, overrides, split_nested

logger = get_logger(__name__)


def _with_uuid4_bits(raw: bytes) -> bytes:
    # Sets the 4-bit version to 4 and the 2-bit variant to 0b10, keeping the other 122 bits
    return uuid.UUID(bytes=raw, version=4).bytes


def id_() -> st.SearchStrategy[bytes]:
    """128-bit device ids laid out as a version 4 UUID."""
    return st.binary(min_size=DEVICE_ID_BYTES, max_size=DEVICE_ID_BYTES).map(_with_uuid4_bits)


def encoded_id() -> st.SearchStrategy[str]:
    """Encoded form of ``id_()``, as used in device URLs."""
    return id_().map(encode_device_id)


def interfaces(
    interface_params: MappingABC[str, Any],
    config: GenerationConfig | None = None,
) -> st.SearchStrategy[list[Interface]]:
    """Interfaces unique by (name, major_version)."""
    config = config or get_config()
    return st.lists(
        interface_from(interface_params, config),
        max_size=config.max_interfaces,
        unique_by=lambda iface: iface.key,
    )


def interfaces_msgs(
    device_interfaces: list[Interface],
    config: GenerationConfig | None = None,
) -> st.SearchStrategy[dict[InterfaceKey, int]]:
    config = config or get_config()
    counts = st.integers(min_value=config.min_interface_msgs, max_value=config.max_interface_msgs)
    return st.fixed_dictionaries({iface.key: counts for iface in device_interfaces})


def interfaces_bytes(
    device_interfaces: list[Interface],
    config: GenerationConfig | None = None,
) -> st.SearchStrategy[dict[InterfaceKey, int]]:
    config = config or get_config()
    counts = st.integers(min_value=config.min_interface_bytes, max_value=config.max_interface_bytes)
    return st.fixed_dictionaries({iface.key: counts for iface in device_interfaces})


def device(**params: Any) -> st.SearchStrategy[Device]:
    """Generate a Device.

    Every drawn field can be overridden by name. ``interface_params`` is a
    nested override mapping applied to every generated interface (and may
    itself hold ``mapping_params``); ``interfaces`` replaces the whole
    collection. Timestamps are drawn from last_disconnection backwards,
    each bounded by the one after it and the first by the wall clock at
    the time this strategy is built. A strategy built at import time (for
    instance in a module-level ``@given``) keeps that import-time bound
    for the whole run; build it inside the test, or draw through
    ``st.data()``, when the bound must track the current time.

    Usage:
        device(id=fixed_id)
        device(interface_params={"type": InterfaceType.PROPERTIES})

    Raises:
        OverrideShapeError: If an override is a tuple of strategies, or a nested
            override is not a mapping
        NestedOverrideConflictError: If a nested mapping_params sets a forwarded field
    """
    resolved = overrides(params)
    interface_params = split_nested("device", resolved, "interface_params", frozenset())
    config = get_config()
    # Built eagerly so malformed nested overrides fail here, not mid-draw
    default_interfaces = interfaces(interface_params, config)
    now = datetime.now(UTC)
    if resolved:
        logger.debug("device_strategy_overridden", params=sorted(resolved))
    return _device(resolved, default_interfaces, now, config)


@st.composite
def _dates(
    draw: st.DrawFn,
    params: MappingABC[str, Any],
    now: datetime,
    config: GenerationConfig,
) -> tuple[datetime, datetime, datetime, datetime]:
    floor = config.min_timestamp
    last_disconnection = draw(
        gen_param(timestamp(min_value=floor, max_value=now), "last_disconnection", params)
    )
    last_connection = draw(
        gen_param(timestamp(min_value=floor, max_value=last_disconnection), "last_connection", params)
    )
    first_credentials_request = draw(
        gen_param(timestamp(min_value=floor, max_value=last_connection), "first_credentials_request", params)
    )
    first_registration = draw(
        gen_param(timestamp(min_value=floor, max_value=first_credentials_request), "first_registration", params)
    )
    return first_registration, first_credentials_request, last_connection, last_disconnection


@st.composite
def _device(
    draw: st.DrawFn,
    params: MappingABC[str, Any],
    default_interfaces: st.SearchStrategy[list[Interface]],
    now: datetime,
    config: GenerationConfig,
) -> Device:
    device_id = draw(gen_param(id_(), "id", params))
    last_seen_ip = draw(gen_param(ipv4(), "last_seen_ip", params))
    last_credentials_request_ip = draw(gen_param(ipv4(), "last_credentials_request_ip", params))
    inhibit_credentials_request = draw(gen_param(st.booleans(), "inhibit_credentials_request", params))
    first_registration, first_credentials_request, last_connection, last_disconnection = draw(
        _dates(params, now, config)
    )
    device_interfaces = list(draw(gen_param(default_interfaces, "interfaces", params)))
    msgs = draw(gen_param(interfaces_msgs(device_interfaces, config), "interfaces_msgs", params))
    bytes_ = draw(gen_param(interfaces_bytes(device_interfaces, config), "interfaces_bytes", params))
    aliases = draw(gen_param(optional(string_map()), "aliases", params))
    attributes = draw(gen_param(optional(string_map()), "attributes", params))

    return Device(
        id=device_id,
        encoded_id=encode_device_id(device_id),
        connected=last_connection >= last_disconnection,
        first_registration=first_registration,
        first_credentials_request=first_credentials_request,
        last_connection=last_connection,
        last_disconnection=last_disconnection,
        last_seen_ip=last_seen_ip,
        last_credentials_request_ip=last_credentials_request_ip,
        inhibit_credentials_request=inhibit_credentials_request,
        interfaces=tuple(device_interfaces),
        interfaces_msgs=dict(msgs),
        interfaces_bytes=dict(bytes_),
        aliases=aliases,
        attributes=attributes,
        total_received_msgs=sum(msgs.values()),
        total_received_bytes=sum(bytes_.values()),
    )
