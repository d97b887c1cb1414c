"""Tests that the splitter pulls items from its source only on demand."""

import itertools

from spansplit import spans_by_key


class TestLaziness:
    """Test pull counts against an instrumented source."""

    def test_construction_pulls_nothing(self, counting_source, successor_rule):
        """Test that creating a splitter does not touch the source."""
        source = counting_source([1, 2, 3])
        spans_by_key(source, *successor_rule)
        assert source.pulls == 0

    def test_advance_pulls_only_the_seed(self, counting_source, successor_rule):
        """Test that opening a span pulls exactly one item."""
        source = counting_source([1, 2, 3])
        splitter = spans_by_key(source, *successor_rule)

        span = splitter.next_span()
        assert source.pulls == 1

        assert next(span) == 1
        assert source.pulls == 1

        assert next(span) == 2
        assert source.pulls == 2

    def test_boundary_item_is_pulled_once(self, counting_source, successor_rule):
        """Test that the item ending a span is handed to the next span without a new pull."""
        source = counting_source([1, 2, 5, 6])
        splitter = spans_by_key(source, *successor_rule)

        assert list(next(splitter)) == [1, 2]
        assert source.pulls == 3

        span = next(splitter)
        assert source.pulls == 3
        assert next(span) == 5
        assert source.pulls == 3

    def test_infinite_source(self, successor_rule):
        """Test splitting an infinite source."""
        # 0..4, 10..14, 20..24, ...
        source = (10 * (n // 5) + n % 5 for n in itertools.count())
        splitter = spans_by_key(source, *successor_rule)

        first_three = [list(span) for span in itertools.islice(splitter, 3)]

        assert first_three == [
            [0, 1, 2, 3, 4],
            [10, 11, 12, 13, 14],
            [20, 21, 22, 23, 24],
        ]

    def test_infinite_span_is_lazy(self, successor_rule):
        """Test reading the start of a span that never ends."""
        splitter = spans_by_key(itertools.count(), *successor_rule)
        span = next(splitter)
        assert list(itertools.islice(span, 5)) == [0, 1, 2, 3, 4]

    def test_skipping_pulls_only_the_abandoned_span(self, counting_source, successor_rule):
        """Test that skipping a span stops at its boundary item."""
        source = counting_source([1, 2, 3, 10, 11, 20])
        splitter = spans_by_key(source, *successor_rule)

        next(splitter)
        assert source.pulls == 1

        span = next(splitter)
        # 2, 3 skipped and 10 pulled as the boundary
        assert source.pulls == 4
        assert next(span) == 10
        assert source.pulls == 4
