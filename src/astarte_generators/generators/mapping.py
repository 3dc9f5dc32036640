# src/astarte_generators/generators/mapping.py
"""Strategies for Astarte mappings.

See https://docs.astarte-platform.org/astarte/latest/040-interface_schema.html#mapping

A mapping is usually generated by its interface, which forwards the
interface-level aggregation, prefix and delivery policy. Generated on its
own it picks those at random.
"""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from typing import Any

from hypothesis import strategies as st

from astarte_generators.contracts.enums import (
    Aggregation,
    DatabaseRetentionPolicy,
    MappingType,
    Reliability,
    Retention,
)
from astarte_generators.contracts.records import Mapping
from astarte_generators.core.config import GenerationConfig, get_config
from astarte_generators.core.logging import get_logger
from astarte_generators.core.unique import unique_integer
from astarte_generators.generators.common import ascii_text
from astarte_generators.generators.params import gen_param, optional, overrides

logger = get_logger(__name__)


def reliability() -> st.SearchStrategy[Reliability]:
    return st.sampled_from(Reliability)


def retention() -> st.SearchStrategy[Retention]:
    return st.sampled_from(Retention)


def explicit_timestamp() -> st.SearchStrategy[bool]:
    return st.booleans()


def allow_unset() -> st.SearchStrategy[bool]:
    return st.booleans()


def expiry(config: GenerationConfig | None = None) -> st.SearchStrategy[int]:
    """0 (never expires) or a positive number of seconds."""
    config = config or get_config()
    return st.one_of(st.just(0), st.integers(min_value=1, max_value=config.max_expiry))


def database_retention_policy() -> st.SearchStrategy[DatabaseRetentionPolicy]:
    return st.sampled_from(DatabaseRetentionPolicy)


def database_retention_ttl(config: GenerationConfig | None = None) -> st.SearchStrategy[int]:
    config = config or get_config()
    return st.integers(min_value=0, max_value=config.max_database_retention_ttl)


def value_type() -> st.SearchStrategy[MappingType]:
    return st.sampled_from(MappingType)


def aggregation() -> st.SearchStrategy[Aggregation]:
    return st.sampled_from(Aggregation)


def endpoint(aggregation: Aggregation, prefix: str = "") -> st.SearchStrategy[str]:
    """Endpoint under ``prefix`` whose last segment depends on the aggregation.

    The last segment carries a process-wide unique integer, so two draws
    never produce the same endpoint.
    """
    label = Aggregation(aggregation).value
    return st.builds(unique_integer).map(lambda n: f"{prefix}/{label}_{n}")


def mapping(**params: Any) -> st.SearchStrategy[Mapping]:
    """Generate a Mapping.

    Every field can be overridden by name with a value or a strategy.
    ``prefix`` is a plain string prepended to generated endpoints; it has
    no effect on an overridden ``endpoint``.

    Usage:
        mapping()
        mapping(aggregation=Aggregation.OBJECT, prefix="/sensors")
        mapping(endpoint="/fixed", value_type=st.sampled_from([MappingType.DOUBLE]))
    """
    resolved = overrides(params)
    if resolved:
        logger.debug("mapping_strategy_overridden", params=sorted(resolved))
    return _mapping(resolved, get_config())


def mapping_from(params: MappingABC[str, Any], config: GenerationConfig) -> st.SearchStrategy[Mapping]:
    """Build the mapping strategy from an override mapping and an explicit config.

    Interfaces call this once per draw, so unlike ``mapping`` it does not log.
    """
    return _mapping(overrides(params), config)


@st.composite
def _mapping(draw: st.DrawFn, params: MappingABC[str, Any], config: GenerationConfig) -> Mapping:
    required = draw(_required_fields(params, config))
    optional_ = draw(_optional_fields(params, config))
    return Mapping(**required, **optional_)


@st.composite
def _required_fields(draw: st.DrawFn, params: MappingABC[str, Any], config: GenerationConfig) -> dict[str, Any]:
    prefix = draw(gen_param(st.just(""), "prefix", params))

    aggregation_ = draw(gen_param(aggregation(), "aggregation", params))
    return {
        "retention": draw(gen_param(optional(retention()), "retention", params)),
        "reliability": draw(gen_param(reliability(), "reliability", params)),
        "explicit_timestamp": draw(gen_param(explicit_timestamp(), "explicit_timestamp", params)),
        "allow_unset": draw(gen_param(allow_unset(), "allow_unset", params)),
        "expiry": draw(gen_param(expiry(config), "expiry", params)),
        "endpoint": draw(gen_param(endpoint(aggregation_, prefix), "endpoint", params)),
        "value_type": draw(gen_param(value_type(), "value_type", params)),
    }


@st.composite
def _optional_fields(draw: st.DrawFn, params: MappingABC[str, Any], config: GenerationConfig) -> dict[str, Any]:
    return {
        "database_retention_policy": draw(
            gen_param(optional(database_retention_policy()), "database_retention_policy", params)
        ),
        "database_retention_ttl": draw(
            gen_param(optional(database_retention_ttl(config)), "database_retention_ttl", params)
        ),
        "description": draw(
            gen_param(optional(ascii_text(max_size=config.description_max_length)), "description", params)
        ),
        "doc": draw(gen_param(optional(ascii_text(max_size=config.doc_max_length)), "doc", params)),
    }
