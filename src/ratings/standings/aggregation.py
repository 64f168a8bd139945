"""Per-item rating aggregation.

Pure functions over a review snapshot. Unreviewed items are a defined state
(mean ``0.0``, count ``0``), not a missing entry.
"""

from collections.abc import Hashable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Aggregate:
    mean: float
    count: int


EMPTY = Aggregate(mean=0.0, count=0)


def aggregate(reviews: Iterable[tuple[Hashable, int]], items: Iterable[Hashable]) -> dict[Hashable, Aggregate]:
    """Group ``(item_id, rating)`` pairs into a mean and count per item.

    Every id in ``items`` appears in the result. Pairs naming an item outside
    ``items`` are dropped, so an item deleted between reads cannot reappear.
    Runs in one pass over each input.
    """
    totals = dict.fromkeys(items, 0)
    counts = dict.fromkeys(totals, 0)

    for item_id, rating in reviews:
        if item_id not in totals:
            continue
        totals[item_id] += rating
        counts[item_id] += 1

    return {
        item_id: Aggregate(mean=totals[item_id] / count, count=count) if count else EMPTY
        for item_id, count in counts.items()
    }
