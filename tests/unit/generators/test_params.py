# tests/unit/generators/test_params.py
"""Unit tests for override lifting, nested override carving and bounded_filter."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from hypothesis.errors import FailedHealthCheck, Unsatisfiable

from astarte_generators.contracts.errors import NestedOverrideConflictError, OverrideShapeError
from astarte_generators.generators.params import (
    Constant,
    Generated,
    as_override,
    bounded_filter,
    gen_param,
    optional,
    overrides,
    split_nested,
)

# =============================================================================
# as_override / overrides
# =============================================================================


class TestAsOverride:
    """Raw values are lifted into tagged overrides."""

    def test_strategy_becomes_generated(self) -> None:
        strategy = st.integers()
        assert as_override("x", strategy) == Generated(strategy)

    def test_plain_value_becomes_constant(self) -> None:
        assert as_override("x", 42) == Constant(42)

    def test_none_is_a_constant(self) -> None:
        """None is a legitimate override: it forces an optional field empty."""
        assert as_override("x", None) == Constant(None)

    def test_tagged_values_pass_through(self) -> None:
        constant = Constant("v")
        generated = Generated(st.text())
        assert as_override("x", constant) is constant
        assert as_override("x", generated) is generated

    def test_plain_tuple_is_a_constant(self) -> None:
        assert as_override("x", (1, "a")) == Constant((1, "a"))

    def test_tuple_of_strategies_rejected(self) -> None:
        with pytest.raises(OverrideShapeError) as exc_info:
            as_override("pair", (st.integers(), st.text()))
        assert exc_info.value.name == "pair"
        assert "pair" in str(exc_info.value)

    def test_mixed_tuple_rejected(self) -> None:
        with pytest.raises(OverrideShapeError):
            as_override("pair", (1, st.text()))

    def test_shape_error_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            as_override("pair", (st.integers(),))

    def test_wrapped_tuple_of_strategies_is_allowed(self) -> None:
        """Constant() is the explicit escape hatch for unusual values."""
        pair = (st.integers(), st.text())
        assert as_override("pair", Constant(pair)).value is pair


class TestOverrides:
    """overrides() builds a fresh validated mapping."""

    def test_empty(self) -> None:
        assert overrides() == {}

    def test_kwargs_win_over_mapping(self) -> None:
        result = overrides({"a": 1, "b": 2}, b=3)
        assert result == {"a": Constant(1), "b": Constant(3)}

    def test_preserves_insertion_order(self) -> None:
        assert list(overrides({"z": 1, "a": 2, "m": 3})) == ["z", "a", "m"]

    def test_does_not_mutate_input(self) -> None:
        params = {"a": 1}
        result = overrides(params)
        result["b"] = Constant(2)
        assert params == {"a": 1}

    def test_validates_eagerly(self) -> None:
        with pytest.raises(OverrideShapeError):
            overrides(endpoint=(st.text(), st.text()))


# =============================================================================
# gen_param
# =============================================================================


class TestGenParam:
    """gen_param returns strategies without drawing."""

    def test_absent_returns_default(self) -> None:
        default = st.integers()
        assert gen_param(default, "x", {"y": 1}) is default

    def test_generated_override_returns_strategy(self) -> None:
        custom = st.text()
        assert gen_param(st.integers(), "x", {"x": Generated(custom)}) is custom

    @given(data=st.data())
    def test_constant_override_yields_value(self, data: st.DataObject) -> None:
        assert data.draw(gen_param(st.integers(), "x", {"x": "fixed"})) == "fixed"

    def test_rejects_tuple_of_strategies(self) -> None:
        with pytest.raises(OverrideShapeError):
            gen_param(st.integers(), "x", {"x": (st.integers(), st.integers())})


# =============================================================================
# split_nested
# =============================================================================


class TestSplitNested:
    """Nested override mappings are carved out and checked for conflicts."""

    def test_missing_key_gives_empty(self) -> None:
        assert split_nested("interface", {}, "mapping_params", frozenset({"aggregation"})) == {}

    def test_nested_values_are_lifted(self) -> None:
        params = overrides(mapping_params={"endpoint": "/fixed"})
        nested = split_nested("interface", params, "mapping_params", frozenset({"aggregation"}))
        assert nested == {"endpoint": Constant("/fixed")}

    def test_conflict_raises_sorted_fields(self) -> None:
        params = {"mapping_params": {"prefix": "/p", "aggregation": "object", "doc": None}}
        with pytest.raises(NestedOverrideConflictError) as exc_info:
            split_nested("interface", params, "mapping_params", frozenset({"aggregation", "prefix"}))
        assert exc_info.value.owner == "interface"
        assert exc_info.value.fields == ["aggregation", "prefix"]

    def test_conflict_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            split_nested("interface", {"n": {"a": 1}}, "n", frozenset({"a"}))

    def test_constant_wrapped_mapping_is_unwrapped(self) -> None:
        params = {"mapping_params": Constant({"endpoint": "/fixed"})}
        nested = split_nested("interface", params, "mapping_params", frozenset())
        assert nested == {"endpoint": Constant("/fixed")}

    def test_strategy_rejected(self) -> None:
        params = overrides(mapping_params=st.just({"endpoint": "/fixed"}))
        with pytest.raises(OverrideShapeError, match="mapping of field overrides") as exc_info:
            split_nested("interface", params, "mapping_params", frozenset())
        assert exc_info.value.name == "mapping_params"

    def test_pairs_rejected(self) -> None:
        params = overrides(mapping_params=[("endpoint", "/fixed")])
        with pytest.raises(OverrideShapeError, match="got list"):
            split_nested("interface", params, "mapping_params", frozenset())

    def test_non_mapping_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            split_nested("device", {"interface_params": "type"}, "interface_params", frozenset())


# =============================================================================
# optional / bounded_filter
# =============================================================================


class TestOptional:
    @given(value=optional(st.integers(min_value=0)))
    def test_value_or_none(self, value: int | None) -> None:
        assert value is None or value >= 0


class TestBoundedFilter:
    """bounded_filter retries within a budget and then rejects."""

    def test_budget_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="max_attempts"):
            bounded_filter(st.integers(), bool, max_attempts=0)

    @given(value=bounded_filter(st.integers(min_value=0, max_value=9), lambda v: v % 2 == 0, max_attempts=50))
    def test_accepted_values_satisfy_predicate(self, value: int) -> None:
        assert value % 2 == 0

    def test_exhausted_budget_is_reported(self) -> None:
        """A predicate that never holds surfaces as a generation failure."""

        @settings(max_examples=10, database=None)
        @given(value=bounded_filter(st.just(1), lambda v: v > 1, max_attempts=3))
        def never_satisfied(value: int) -> None:
            pytest.fail("no value should ever be generated")

        with pytest.raises((Unsatisfiable, FailedHealthCheck)):
            never_satisfied()
