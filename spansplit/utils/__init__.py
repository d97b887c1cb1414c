"""Helper predicates and adapters for spansplit."""
