"""Partition-wise value normalization for area encodings"""

from collections.abc import Callable, Iterable

from ..data.models import Aggregate, NormalizedAggregate


def magnitude(aggregate: Aggregate) -> float:
    """Default raw value: the summed magnitude column (liquidity, market cap)."""
    return aggregate.magnitude


def normalize(aggregates: Iterable[Aggregate],
              raw_value_fn: Callable[[Aggregate], float] = magnitude) -> list[NormalizedAggregate]:
    """
    Rescale aggregates of one partition so their values sum to 1.

    Aggregates with a non-positive raw value cannot be area-encoded and are
    dropped. A zero total is replaced by 1, which can only happen for an empty
    partition. Input order is preserved.

    Args:
        aggregates: Aggregates of a single partition
        raw_value_fn: Magnitude to normalize

    Returns:
        Normalized aggregates, empty for an empty partition
    """
    kept = [(a, raw_value_fn(a)) for a in aggregates]
    kept = [(a, raw) for a, raw in kept if raw > 0]

    total = sum(raw for _, raw in kept) or 1.0

    return [
        NormalizedAggregate(aggregate=a, raw_value=raw, value=raw / total)
        for a, raw in kept
    ]
