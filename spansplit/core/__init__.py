"""Core span splitting machinery for spansplit."""

from spansplit.core.splitter import Span, SpanSplitter, spans_by_key

__all__ = ["Span", "SpanSplitter", "spans_by_key"]
