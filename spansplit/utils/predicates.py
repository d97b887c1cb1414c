"""
Predicate utilities for spansplit.

This module provides key projections and adjacency predicates that cover the
common ways of splitting a sequence into spans.
"""

from typing import Any, Callable


def identity(item: Any) -> Any:
    """Return the item itself, for splitting on the items' own values."""
    return item


def successor(previous: Any, current: Any) -> bool:
    """Check whether current is exactly one more than previous."""
    return previous + 1 == current


def equal(previous: Any, current: Any) -> bool:
    """Check whether two consecutive keys are equal."""
    return previous == current


def within(gap: int) -> Callable[[Any, Any], bool]:
    """
    Build a predicate joining keys that increase by at most ``gap``.

    Args:
        gap: The largest allowed step between consecutive keys

    Returns:
        A predicate returning True when ``0 <= current - previous <= gap``

    Raises:
        ValueError: If gap is negative
    """
    if gap < 0:
        raise ValueError(f"gap must be non-negative, got {gap}")

    def _within(previous: Any, current: Any) -> bool:
        return 0 <= current - previous <= gap

    return _within
