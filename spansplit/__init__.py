"""
spansplit is a Python library for splitting iterables into contiguous spans.

Consecutive items are joined into the same span when a caller-supplied
predicate accepts their keys. Both the sequence of spans and each span are
lazy: items are pulled from the source only as they are read.

Example:
    >>> from spansplit import spans_by_key
    >>> splitter = spans_by_key([1, 2, 5, 6, 7, 11, 13, 14, 15], lambda x: x, lambda a, b: a + 1 == b)
    >>> for span in splitter:
    ...     print("span =", list(span))
    span = [1, 2]
    span = [5, 6, 7]
    span = [11]
    span = [13, 14, 15]
"""

from spansplit._version import __version__
from spansplit.core.splitter import Span, SpanSplitter, spans_by_key
from spansplit.utils.iteration import (
    collect_spans,
    consecutive_spans,
    equal_key_spans,
    span_lengths,
    spans_by,
)
from spansplit.utils.predicates import equal, identity, successor, within

__all__ = [
    "__version__",
    "Span",
    "SpanSplitter",
    "spans_by_key",
    "spans_by",
    "consecutive_spans",
    "equal_key_spans",
    "collect_spans",
    "span_lengths",
    "identity",
    "successor",
    "equal",
    "within",
]
