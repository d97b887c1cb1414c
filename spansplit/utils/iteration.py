"""
Iteration utilities for spansplit.

This module provides shortcuts around spans_by_key for the usual splitting
rules, and helpers for consuming a SpanSplitter.
"""

from typing import Any, Callable, Iterable, Iterator, List, TypeVar

from spansplit.core.splitter import SpanSplitter, spans_by_key
from spansplit.utils.predicates import equal, identity, successor

T = TypeVar("T")


def spans_by(source: Iterable[T], adjacent_fn: Callable[[T, T], bool]) -> SpanSplitter[T, T]:
    """
    Split an iterable into spans, comparing the items themselves.

    Args:
        source: The items to split
        adjacent_fn: Returns True if two consecutive items belong to the same span

    Returns:
        A SpanSplitter over the items
    """
    return spans_by_key(source, identity, adjacent_fn)


def consecutive_spans(
    source: Iterable[T], key_fn: Callable[[T], Any] = identity
) -> SpanSplitter[T, Any]:
    """
    Split an iterable into runs of consecutive integer keys.

    Args:
        source: The items to split
        key_fn: Projects an item to an integer position

    Returns:
        A SpanSplitter whose spans have keys increasing by exactly one

    Example:
        >>> [list(span) for span in consecutive_spans([1, 2, 5, 6, 7, 11])]
        [[1, 2], [5, 6, 7], [11]]
    """
    return spans_by_key(source, key_fn, successor)


def equal_key_spans(
    source: Iterable[T], key_fn: Callable[[T], Any] = identity
) -> SpanSplitter[T, Any]:
    """
    Split an iterable into runs of items sharing the same key.

    Args:
        source: The items to split
        key_fn: Projects an item to its key

    Returns:
        A SpanSplitter whose spans hold items with equal keys
    """
    return spans_by_key(source, key_fn, equal)


def collect_spans(splitter: Iterable[Iterable[T]]) -> Iterator[List[T]]:
    """
    Materialize each span into a list.

    Spans are read one at a time, so only the current span is held in memory.

    Args:
        splitter: The splitter to consume

    Yields:
        The items of each span as a list
    """
    for span in splitter:
        yield list(span)


def span_lengths(splitter: Iterable[Iterable[Any]]) -> Iterator[int]:
    """
    Count the items in each span without keeping them.

    Args:
        splitter: The splitter to consume

    Yields:
        The number of items in each span
    """
    for span in splitter:
        count = 0
        for _ in span:
            count += 1
        yield count
