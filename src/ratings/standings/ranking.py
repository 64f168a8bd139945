"""Dense rankings over aggregated standings.

Ties share a rank and the next distinct value takes the following integer,
so ranks run 1, 2, 3, ... without gaps. Both rankings are rebuilt from
scratch on every call; a single new review can move every item.
"""

from collections.abc import Hashable, Mapping

from ratings.standings.aggregation import Aggregate


def dense_rank(values: Mapping[Hashable, float]) -> dict[Hashable, int]:
    """Rank keys by value, highest first."""
    positions = {value: rank for rank, value in enumerate(sorted(set(values.values()), reverse=True), start=1)}
    return {key: positions[value] for key, value in values.items()}


def rank_by_score(aggregates: Mapping[Hashable, Aggregate]) -> dict[Hashable, int]:
    """Rank by mean rating. Unreviewed items tie on 0 at the bottom."""
    return dense_rank({item_id: agg.mean for item_id, agg in aggregates.items()})


def rank_by_popularity(aggregates: Mapping[Hashable, Aggregate]) -> dict[Hashable, int]:
    """Rank by review count, independently of the score."""
    return dense_rank({item_id: agg.count for item_id, agg in aggregates.items()})
