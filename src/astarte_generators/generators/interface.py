# src/astarte_generators/generators/interface.py
"""Strategies for Astarte interfaces.

See https://docs.astarte-platform.org/astarte/latest/030-interface.html

Fields are drawn in dependency order: major_version before
minor_version, type before aggregation, and the interface-level delivery
policy before the mappings that inherit it.
"""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from typing import Any

from hypothesis import strategies as st

from astarte_generators.contracts.enums import Aggregation, InterfaceType, Ownership
from astarte_generators.contracts.records import Interface, Mapping
from astarte_generators.core.config import GenerationConfig, get_config
from astarte_generators.core.logging import get_logger
from astarte_generators.generators import mapping as mapping_gen
from astarte_generators.generators.common import ALPHANUMERIC, ascii_text
from astarte_generators.generators.params import (
    bounded_filter,
    gen_param,
    optional,
    overrides,
    split_nested,
)

logger = get_logger(__name__)

# Resolved once per interface and passed to every mapping it owns
FORWARDED_TO_MAPPINGS: frozenset[str] = frozenset(
    {
        "aggregation",
        "prefix",
        "retention",
        "reliability",
        "expiry",
        "allow_unset",
        "explicit_timestamp",
    }
)

_SUBPATH_ALPHABET = "abcdefghijklmnopqrstuvwxyz_"


def id_() -> st.SearchStrategy[bytes]:
    """Random (version 4) UUIDs as 16 raw bytes."""
    return st.uuids(version=4).map(lambda u: u.bytes)


def _starts_with_letter(segments: list[str]) -> bool:
    return not segments[0][0].isdigit()


def name(config: GenerationConfig | None = None) -> st.SearchStrategy[str]:
    """Dotted names like ``org.astarte.Sensors`` whose first character is not a digit."""
    config = config or get_config()
    segments = st.lists(
        st.text(alphabet=ALPHANUMERIC, min_size=1, max_size=config.name_segment_max_length),
        min_size=config.name_min_segments,
        max_size=config.name_max_segments,
    )
    return bounded_filter(segments, _starts_with_letter, max_attempts=config.name_max_attempts).map(".".join)


def major_version(config: GenerationConfig | None = None) -> st.SearchStrategy[int]:
    config = config or get_config()
    return st.integers(min_value=0, max_value=config.max_major_version)


def minor_version(major: int) -> st.SearchStrategy[int]:
    """A draft interface (major 0) must have a minor version of at least 1."""
    if major == 0:
        return st.integers(min_value=1, max_value=255)
    return st.integers(min_value=0, max_value=255)


def type_() -> st.SearchStrategy[InterfaceType]:
    return st.sampled_from(InterfaceType)


def ownership() -> st.SearchStrategy[Ownership]:
    return st.sampled_from(Ownership)


def aggregation(interface_type: InterfaceType) -> st.SearchStrategy[Aggregation]:
    """Properties interfaces are always individual."""
    if interface_type == InterfaceType.PROPERTIES:
        return st.just(Aggregation.INDIVIDUAL)
    return st.sampled_from(Aggregation)


def endpoint_subpath(config: GenerationConfig | None = None) -> st.SearchStrategy[str]:
    config = config or get_config()
    return st.text(alphabet=_SUBPATH_ALPHABET, min_size=1, max_size=config.subpath_max_length)


def endpoint_parametric_subpath(config: GenerationConfig | None = None) -> st.SearchStrategy[str]:
    """A parametric path segment such as ``%{sensor_id}``."""
    return endpoint_subpath(config).map(lambda subpath: "%{" + subpath + "}")


def endpoint_prefix(config: GenerationConfig | None = None) -> st.SearchStrategy[str]:
    """``/``-joined mix of plain and parametric segments, with a leading ``/``."""
    config = config or get_config()
    segment = st.one_of(endpoint_subpath(config), endpoint_parametric_subpath(config))
    return st.lists(segment, min_size=1, max_size=config.prefix_max_segments).map(
        lambda segments: "/" + "/".join(segments)
    )


def mappings(
    mapping_params: MappingABC[str, Any],
    config: GenerationConfig | None = None,
) -> st.SearchStrategy[list[Mapping]]:
    """Mappings that differ as whole records.

    Uniqueness is on the whole record, not on the endpoint alone, so an
    overridden endpoint such as ``"/fixed"`` is used on every mapping.
    """
    config = config or get_config()
    return st.lists(
        mapping_gen.mapping_from(mapping_params, config),
        min_size=config.min_mappings,
        max_size=config.max_mappings,
        unique=True,
    )


def interface(**params: Any) -> st.SearchStrategy[Interface]:
    """Generate an Interface.

    Every field can be overridden by name. ``prefix``, ``retention``,
    ``reliability``, ``expiry``, ``allow_unset`` and ``explicit_timestamp``
    are interface-level settings forwarded to every generated mapping.
    ``mapping_params`` is a nested override mapping applied to every
    mapping; it may not set any forwarded field. ``mappings`` replaces the
    whole collection.

    Usage:
        interface(type=InterfaceType.PROPERTIES)
        interface(mapping_params={"endpoint": "/fixed"})

    Raises:
        OverrideShapeError: If an override is a tuple of strategies, or a nested
            override is not a mapping
        NestedOverrideConflictError: If mapping_params sets a forwarded field
    """
    strategy = interface_from(params, get_config())
    if params:
        logger.debug("interface_strategy_overridden", params=sorted(params))
    return strategy


def interface_from(params: MappingABC[str, Any], config: GenerationConfig) -> st.SearchStrategy[Interface]:
    """Build the interface strategy from an override mapping and an explicit config.

    Device strategies log their own overrides, so unlike ``interface`` this does not log.
    """
    resolved = overrides(params)
    mapping_params = split_nested("interface", resolved, "mapping_params", FORWARDED_TO_MAPPINGS)
    return _interface(resolved, mapping_params, config)


@st.composite
def _interface(
    draw: st.DrawFn,
    params: MappingABC[str, Any],
    mapping_params: MappingABC[str, Any],
    config: GenerationConfig,
) -> Interface:
    required = draw(_required_fields(params, mapping_params, config))
    optional_ = draw(_optional_fields(params, config))
    return Interface(**required, **optional_)


@st.composite
def _required_fields(
    draw: st.DrawFn,
    params: MappingABC[str, Any],
    mapping_params: MappingABC[str, Any],
    config: GenerationConfig,
) -> dict[str, Any]:
    interface_id = draw(gen_param(id_(), "id", params))
    interface_name = draw(gen_param(name(config), "name", params))
    major = draw(gen_param(major_version(config), "major_version", params))
    minor = draw(gen_param(minor_version(major), "minor_version", params))
    interface_type = draw(gen_param(type_(), "type", params))
    aggregation_ = draw(gen_param(aggregation(interface_type), "aggregation", params))
    ownership_ = draw(gen_param(ownership(), "ownership", params))

    forwarded = {
        "aggregation": aggregation_,
        "prefix": draw(gen_param(endpoint_prefix(config), "prefix", params)),
        "retention": draw(gen_param(mapping_gen.retention(), "retention", params)),
        "reliability": draw(gen_param(mapping_gen.reliability(), "reliability", params)),
        "expiry": draw(gen_param(mapping_gen.expiry(config), "expiry", params)),
        "allow_unset": draw(gen_param(mapping_gen.allow_unset(), "allow_unset", params)),
        "explicit_timestamp": draw(gen_param(mapping_gen.explicit_timestamp(), "explicit_timestamp", params)),
    }
    interface_mappings = draw(gen_param(mappings({**mapping_params, **forwarded}, config), "mappings", params))

    return {
        "id": interface_id,
        "name": interface_name,
        "major_version": major,
        "minor_version": minor,
        "type": interface_type,
        "ownership": ownership_,
        "aggregation": aggregation_,
        "mappings": tuple(interface_mappings),
    }


@st.composite
def _optional_fields(draw: st.DrawFn, params: MappingABC[str, Any], config: GenerationConfig) -> dict[str, Any]:
    return {
        "description": draw(
            gen_param(optional(ascii_text(max_size=config.description_max_length)), "description", params)
        ),
        "doc": draw(gen_param(optional(ascii_text(max_size=config.doc_max_length)), "doc", params)),
    }
