# src/astarte_generators/generators/params.py
"""Parameter overrides for composite strategies.

Every field of a generated record is drawn through ``gen_param``, which
picks between the field's default strategy and whatever the caller put
in the override mapping under the field's name:

- name absent            -> the default strategy, untouched
- ``Generated(strategy)`` -> that strategy, verbatim
- ``Constant(value)``     -> ``st.just(value)``

Raw values are lifted with ``as_override``: a ``SearchStrategy`` means
``Generated``, anything else means ``Constant``. Tuples holding strategies
have no defined meaning and are rejected with ``OverrideShapeError``.

Usage:
    interface(name="org.example.Sensors", major_version=st.integers(1, 3))
    interface(**overrides(type=Constant(InterfaceType.PROPERTIES)))
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass
from typing import Any

from hypothesis import reject
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from astarte_generators.contracts.errors import NestedOverrideConflictError, OverrideShapeError
from astarte_generators.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Constant[T]:
    """Override that always yields ``value``."""

    value: T


@dataclass(frozen=True)
class Generated[T]:
    """Override that replaces the default strategy with ``strategy``."""

    strategy: SearchStrategy[T]


type Override = Constant[Any] | Generated[Any]


def _is_strategy_tuple(value: object) -> bool:
    return isinstance(value, tuple) and any(isinstance(item, SearchStrategy) for item in value)


def as_override(name: str, value: object) -> Override:
    """Lift a raw override value into its tagged form.

    Args:
        name: Parameter name, used in error messages
        value: Raw value, strategy, or an already tagged override

    Raises:
        OverrideShapeError: If value is a tuple containing strategies
    """
    match value:
        case Constant() | Generated():
            return value
        case SearchStrategy():
            return Generated(value)
        case _ if _is_strategy_tuple(value):
            raise OverrideShapeError(name, value)
        case _:
            return Constant(value)


def overrides(params: MappingABC[str, Any] | None = None, /, **kwargs: Any) -> dict[str, Override]:
    """Build a validated override mapping.

    The result is a fresh dict in insertion order, so nested generators
    never share mutable state with the caller. Keyword arguments win over
    entries in ``params``.
    """
    merged: dict[str, Any] = dict(params) if params is not None else {}
    merged.update(kwargs)
    return {name: as_override(name, value) for name, value in merged.items()}


def gen_param[T](default: SearchStrategy[T], name: str, params: MappingABC[str, Any]) -> SearchStrategy[T]:
    """Resolve the strategy for one field.

    Never draws: the returned strategy is the default itself when ``name``
    is not overridden, and the caller's strategy itself when it is
    overridden with one.
    """
    if name not in params:
        return default
    match as_override(name, params[name]):
        case Generated(strategy):
            return strategy
        case Constant(value):
            return st.just(value)


def split_nested(
    owner: str,
    params: MappingABC[str, Any],
    key: str,
    forwarded: frozenset[str],
) -> dict[str, Override]:
    """Carve the nested override mapping stored under ``key``.

    Args:
        owner: Name of the enclosing generator, for error messages
        params: Overrides of the enclosing generator
        key: Parameter holding the nested mapping (e.g. "mapping_params")
        forwarded: Fields the enclosing generator resolves and passes down

    Raises:
        NestedOverrideConflictError: If the nested mapping sets a forwarded field
        OverrideShapeError: If the nested override is not a mapping
    """
    nested = params.get(key)
    if isinstance(nested, Constant):
        nested = nested.value
    if nested is None:
        return {}
    if not isinstance(nested, MappingABC):
        raise OverrideShapeError(key, nested, "a mapping of field overrides")
    conflicts = sorted(forwarded.intersection(nested))
    if conflicts:
        raise NestedOverrideConflictError(owner, conflicts)
    return overrides(nested)


def optional[T](strategy: SearchStrategy[T]) -> SearchStrategy[T | None]:
    """Either a value from ``strategy`` or None."""
    return st.one_of(strategy, st.none())


def bounded_filter[T](
    strategy: SearchStrategy[T],
    predicate: Callable[[T], bool],
    *,
    max_attempts: int,
) -> SearchStrategy[T]:
    """Filter ``strategy`` with an explicit retry budget.

    Draws up to ``max_attempts`` values and returns the first accepted one.
    When the budget runs out the example is rejected; Hypothesis reports a
    property that keeps rejecting as Unsatisfiable (or fails the
    filter_too_much health check), it is never silently skipped.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    @st.composite
    def _bounded(draw: st.DrawFn) -> T:
        for _ in range(max_attempts):
            value = draw(strategy)
            if predicate(value):
                return value
        logger.debug("bounded_filter_exhausted", max_attempts=max_attempts)
        reject()

    return _bounded()
