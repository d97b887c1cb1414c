"""Pytest configuration for spansplit tests."""

from typing import Any, Iterable, List

import pytest


class CountingSource:
    """An iterator that records how many items have been pulled from it."""

    def __init__(self, items: Iterable[Any]) -> None:
        self._it = iter(items)
        self.pulls = 0
        self.stop_calls = 0

    def __iter__(self) -> "CountingSource":
        return self

    def __next__(self) -> Any:
        try:
            item = next(self._it)
        except StopIteration:
            self.stop_calls += 1
            raise
        self.pulls += 1
        return item


@pytest.fixture
def worked_example() -> List[int]:
    """Return the documented worked example input."""
    return [1, 2, 5, 6, 7, 11, 13, 14, 15]


@pytest.fixture
def words() -> List[str]:
    """Return words whose lengths form runs."""
    return ["abc", "run", "tag", "go", "be", "ring", "zip", "zap", "put", "", "", "end"]


@pytest.fixture
def counting_source():
    """Return a factory for pull-counting sources."""
    return CountingSource


@pytest.fixture
def successor_rule():
    """Return the (key_fn, adjacent_fn) pair of the worked example."""
    return (lambda x: x), (lambda a, b: a + 1 == b)
