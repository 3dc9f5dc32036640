# tests/unit/core/test_unique.py
"""Tests for the process-wide unique counter."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from astarte_generators.core.unique import unique_integer


class TestUniqueInteger:
    def test_positive_and_increasing(self) -> None:
        first = unique_integer()
        second = unique_integer()
        assert first >= 1
        assert second > first

    def test_no_repeats_across_threads(self) -> None:
        """Concurrent callers never observe the same value."""

        def take(n: int) -> list[int]:
            return [unique_integer() for _ in range(n)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            batches = list(pool.map(take, [500] * 8))

        values = [v for batch in batches for v in batch]
        assert len(values) == 4000
        assert len(set(values)) == len(values)
