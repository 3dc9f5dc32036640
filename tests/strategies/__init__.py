# tests/strategies/__init__.py
"""Hypothesis strategies and settings shared by the property tests.

    from tests.strategies import arbitrary_strategies, NESTED_SETTINGS
"""

from tests.strategies.overrides import arbitrary_strategies, arbitrary_values, param_names
from tests.strategies.settings import NESTED_SETTINGS, QUICK_SETTINGS, STANDARD_SETTINGS

__all__ = [
    "NESTED_SETTINGS",
    "QUICK_SETTINGS",
    "STANDARD_SETTINGS",
    "arbitrary_strategies",
    "arbitrary_values",
    "param_names",
]
