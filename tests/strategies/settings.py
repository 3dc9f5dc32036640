# tests/strategies/settings.py
"""Standardized Hypothesis settings profiles for property tests.

Tiers:
- STANDARD_SETTINGS: 100 examples - Regular property tests
- NESTED_SETTINGS: 50 examples - Interfaces and devices (nested lists)
- QUICK_SETTINGS: 20 examples - Fast validation tests
"""

from hypothesis import HealthCheck, settings

STANDARD_SETTINGS = settings(max_examples=100)
# Devices nest interfaces which nest mappings; generation is slow and the
# name filter rejects a few draws by design.
NESTED_SETTINGS = settings(
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.data_too_large, HealthCheck.filter_too_much],
)
QUICK_SETTINGS = settings(max_examples=20)
