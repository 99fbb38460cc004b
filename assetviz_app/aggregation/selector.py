"""
Ranked selections for bar encodings.

Two policies:
- signed: top gainers by mean followed by top losers, for returns
- magnitude: largest raw magnitudes, for liquidity
"""

from collections.abc import Callable, Iterable

from ..data.models import Aggregate
from .normalizer import magnitude


def select(aggregates: Iterable[Aggregate], pos_n: int, neg_n: int) -> list[Aggregate]:
    """
    Select the top ``pos_n`` gainers and top ``neg_n`` losers by mean.

    Positives come first, strongest first. The loser slice is taken most
    negative first and then reversed, so the most negative entry ends the
    sequence. Zero means get no slot. Ties keep input order.

    Args:
        aggregates: Candidate aggregates
        pos_n: Maximum number of positive entries
        neg_n: Maximum number of negative entries

    Returns:
        At most ``pos_n + neg_n`` aggregates, no duplicates
    """
    aggregates = list(aggregates)
    pos_n = max(pos_n, 0)
    neg_n = max(neg_n, 0)

    positives = [a for a in aggregates if a.mean > 0]
    negatives = [a for a in aggregates if a.mean < 0]

    # sorted() is stable, including with reverse=True
    top = sorted(positives, key=lambda a: a.mean, reverse=True)[:pos_n]
    bottom = sorted(negatives, key=lambda a: a.mean)[:neg_n]
    bottom.reverse()

    selection = []
    seen = set()
    for a in top + bottom:
        if a.identity in seen:
            continue
        seen.add(a.identity)
        selection.append(a)

    return selection


def select_by_magnitude(aggregates: Iterable[Aggregate], n: int,
                        magnitude_fn: Callable[[Aggregate], float] = magnitude) -> list[Aggregate]:
    """
    Select the ``n`` aggregates with the largest positive magnitude.

    Args:
        aggregates: Candidate aggregates
        n: Maximum number of entries
        magnitude_fn: Raw magnitude to rank by

    Returns:
        Aggregates ordered by descending magnitude, ties in input order
    """
    candidates = [a for a in aggregates if magnitude_fn(a) > 0]
    return sorted(candidates, key=magnitude_fn, reverse=True)[:max(n, 0)]
