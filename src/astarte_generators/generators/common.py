"""Leaf strategies shared by several composite generators."""

from __future__ import annotations

import string
from datetime import UTC, datetime
from ipaddress import IPv4Address

from hypothesis import strategies as st

ALPHANUMERIC = string.ascii_letters + string.digits
# Printable ASCII, space to tilde
ASCII_PRINTABLE = st.characters(min_codepoint=32, max_codepoint=126)


def alphanumeric(*, min_size: int = 0, max_size: int | None = None) -> st.SearchStrategy[str]:
    return st.text(alphabet=ALPHANUMERIC, min_size=min_size, max_size=max_size)


def ascii_text(*, max_size: int) -> st.SearchStrategy[str]:
    """Non-empty printable ASCII text of at most ``max_size`` characters."""
    return st.text(alphabet=ASCII_PRINTABLE, min_size=1, max_size=max_size)


def string_map() -> st.SearchStrategy[dict[str, str]]:
    """Dict of non-empty alphanumeric keys to non-empty alphanumeric values."""
    return st.dictionaries(alphanumeric(min_size=1), alphanumeric(min_size=1))


def ipv4() -> st.SearchStrategy[IPv4Address]:
    return st.ip_addresses(v=4)


def timestamp(*, min_value: datetime, max_value: datetime) -> st.SearchStrategy[datetime]:
    """Aware UTC datetimes in ``[min_value, max_value]``.

    If ``min_value`` is later than ``max_value`` (an overridden upper
    bound earlier than the configured floor) the floor is lowered to the
    bound, so the strategy always has at least one value.
    """
    upper = max_value.astimezone(UTC).replace(tzinfo=None)
    lower = min(min_value.astimezone(UTC).replace(tzinfo=None), upper)
    return st.datetimes(min_value=lower, max_value=upper, timezones=st.just(UTC))
