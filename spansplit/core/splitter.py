"""
Span splitter module for spansplit.

This module provides the SpanSplitter class, which partitions an iterable into
a lazy sequence of contiguous spans, and the Span class, which iterates over
the items of a single span.

Two items that follow each other in the source belong to the same span when
``adjacent_fn(key_fn(previous), key_fn(current))`` is true. Only consecutive
pairs are compared, so span membership is greedy and local: the items of a
span are not required to be related to each other beyond their neighbours.

Example:
    >>> splitter = spans_by_key([1, 2, 5, 6, 7, 11, 13, 14, 15], lambda x: x, lambda a, b: a + 1 == b)
    >>> [list(span) for span in splitter]
    [[1, 2], [5, 6, 7], [11], [13, 14, 15]]
"""

import logging
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")

# Marks an empty pending slot; items themselves may be None
_EMPTY: Any = object()


class SpanSplitter(Generic[T, K]):
    """
    Splits an iterable into contiguous spans of related items.

    The splitter owns every piece of mutable state: the source iterator, the
    pending slot holding the item that ended the previous span, the key of the
    last emitted item, and the generation number of the current span. Spans
    only hold a reference back to the splitter, so at most one span can be
    active at a time.

    Advancing to the next span while the current one still has unread items
    skips those items and invalidates the current span. Further pulls on an
    invalidated span signal the end of the span.
    """

    def __init__(
        self,
        source: Iterable[T],
        key_fn: Callable[[T], K],
        adjacent_fn: Callable[[K, K], bool],
    ) -> None:
        """
        Initialize the splitter. No item is pulled from the source here.

        Args:
            source: The items to split, consumed lazily and only once
            key_fn: Projects an item to its comparison key
            adjacent_fn: Given the key of the last emitted item and the key of
                the candidate item, returns True if the candidate continues the span

        Raises:
            TypeError: If key_fn or adjacent_fn is not callable
        """
        if not callable(key_fn):
            raise TypeError(f"key_fn must be callable, got {type(key_fn).__name__}")
        if not callable(adjacent_fn):
            raise TypeError(f"adjacent_fn must be callable, got {type(adjacent_fn).__name__}")

        self._source: Iterator[T] = iter(source)
        self._key_fn = key_fn
        self._adjacent_fn = adjacent_fn

        self._pending: Any = _EMPTY
        self._pending_key: Any = _EMPTY
        self._last_key: Any = _EMPTY
        self._exhausted = False

        self._generation = 0
        # True until the current span has emitted its seed item
        self._fresh = False
        self._span_done = True

    def __iter__(self) -> "SpanSplitter[T, K]":
        return self

    def __next__(self) -> "Span[T, K]":
        span = self.next_span()
        if span is None:
            raise StopIteration
        return span

    @property
    def exhausted(self) -> bool:
        """Whether the source has reported that it has no more items."""
        return self._exhausted

    def next_span(self) -> Optional["Span[T, K]"]:
        """
        Advance to the next span.

        The item that ended the previous span seeds the new one. If there is
        no such item, one item is pulled from the source. Any unread items of
        the current span are skipped first.

        Returns:
            The next Span, or None if the source is exhausted
        """
        if not self._span_done:
            self._skip_current()

        if self._pending is _EMPTY:
            item = self._pull()
            if item is _EMPTY:
                return None
            self._pending = item
        if self._pending_key is _EMPTY:
            self._pending_key = self._key_fn(self._pending)

        self._last_key = self._pending_key
        self._generation += 1
        self._fresh = True
        self._span_done = False
        logger.debug("Opened span %d", self._generation)
        return Span(self, self._generation)

    def _pull(self) -> Any:
        """Pull one item from the source, or return _EMPTY once it is exhausted."""
        if self._exhausted:
            return _EMPTY
        try:
            return next(self._source)
        except StopIteration:
            self._exhausted = True
            logger.debug("Source exhausted after span %d", self._generation)
            return _EMPTY

    def _take_pending(self) -> Any:
        item = self._pending
        self._pending = _EMPTY
        self._pending_key = _EMPTY
        return item

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation and not self._span_done

    def _next_in_span(self, generation: int) -> T:
        """
        Return the next item of the span with the given generation.

        Args:
            generation: The generation of the span asking for an item

        Returns:
            The next item of that span

        Raises:
            StopIteration: If the span has ended or has been replaced
        """
        if not self._is_current(generation):
            raise StopIteration

        # The seed was already classified by next_span
        if self._fresh:
            self._fresh = False
            return self._take_pending()

        if self._pending is _EMPTY:
            item = self._pull()
            if item is _EMPTY:
                self._span_done = True
                raise StopIteration
            self._pending = item
        if self._pending_key is _EMPTY:
            self._pending_key = self._key_fn(self._pending)

        key = self._pending_key
        if not self._adjacent_fn(self._last_key, key):
            # Boundary item stays pending and seeds the next span
            self._span_done = True
            logger.debug("Span %d ended at boundary", generation)
            raise StopIteration

        self._last_key = key
        return self._take_pending()

    def _skip_current(self) -> None:
        """Discard the unread items of the current span."""
        skipped = 0
        while True:
            try:
                self._next_in_span(self._generation)
            except StopIteration:
                break
            skipped += 1
        if skipped:
            logger.debug("Skipped %d unread items of span %d", skipped, self._generation)


class Span(Generic[T, K]):
    """
    Iterator over the items of one span.

    A span is never empty: its first item is the one that opened it. Once a
    span signals its end, it keeps signalling its end.
    """

    __slots__ = ("_splitter", "_generation")

    def __init__(self, splitter: SpanSplitter[T, K], generation: int) -> None:
        self._splitter = splitter
        self._generation = generation

    def __iter__(self) -> "Span[T, K]":
        return self

    def __next__(self) -> T:
        return self._splitter._next_in_span(self._generation)

    @property
    def generation(self) -> int:
        """The 1-based position of this span in the split sequence."""
        return self._generation

    @property
    def is_active(self) -> bool:
        """Whether this span may still yield items."""
        return self._splitter._is_current(self._generation)

    def __repr__(self) -> str:
        state = "active" if self.is_active else "finished"
        return f"Span(generation={self._generation}, {state})"


def spans_by_key(
    source: Iterable[T],
    key_fn: Callable[[T], K],
    adjacent_fn: Callable[[K, K], bool],
) -> SpanSplitter[T, K]:
    """
    Split an iterable into contiguous spans.

    Items are not compared directly; each item is projected to a key with
    ``key_fn``, and ``adjacent_fn`` receives the key of the previous item and
    the key of the current item, in that order. The predicate does not need
    to be symmetric or transitive.

    Args:
        source: The items to split
        key_fn: Projects an item to its comparison key
        adjacent_fn: Returns True if two consecutive keys belong to the same span

    Returns:
        A SpanSplitter yielding one Span per run of adjacent items

    Examples:
        >>> splitter = spans_by_key(["abc", "run", "go", "be", "ring"], len, lambda a, b: a == b)
        >>> [list(span) for span in splitter]
        [['abc', 'run'], ['go', 'be'], ['ring']]

        >>> # Each span must be read before advancing; unread items are skipped
        >>> splitter = spans_by_key([1, 2, 3, 7, 8], lambda x: x, lambda a, b: a + 1 == b)
        >>> first = next(splitter)
        >>> next(first)
        1
        >>> list(next(splitter))
        [7, 8]
    """
    return SpanSplitter(source, key_fn, adjacent_fn)
