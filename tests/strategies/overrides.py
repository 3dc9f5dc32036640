# tests/strategies/overrides.py
"""Strategies for override mappings: names, plain values and strategies."""

from hypothesis import strategies as st

# Parameter names (valid Python identifiers)
param_names = st.text(
    min_size=1,
    max_size=20,
    alphabet="abcdefghijklmnopqrstuvwxyz_",
)

# Values that are never strategies and never tuples of strategies
arbitrary_values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    st.text(max_size=20),
    st.binary(max_size=16),
    st.lists(st.integers(), max_size=5),
    st.dictionaries(st.text(max_size=5), st.integers(), max_size=3),
    st.tuples(st.integers(), st.text(max_size=5)),
)

# A pool of distinct strategy objects to use as defaults and overrides
arbitrary_strategies = st.sampled_from(
    [
        st.integers(),
        st.booleans(),
        st.text(),
        st.binary(),
        st.floats(),
        st.none(),
        st.lists(st.integers()),
        st.dictionaries(st.text(), st.integers()),
        st.tuples(st.integers(), st.integers()),
        st.just("constant"),
        st.sampled_from(["a", "b", "c"]),
    ]
)
