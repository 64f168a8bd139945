"""Tests for per-item aggregation of ratings."""

from ratings.standings.aggregation import Aggregate, aggregate


class TestAggregate:
    def test_mean_and_count(self):
        result = aggregate([("a", 9), ("a", 8), ("a", 7), ("a", 9)], ["a"])
        assert result["a"] == Aggregate(mean=8.25, count=4)

    def test_unreviewed_item_is_zero_not_missing(self):
        result = aggregate([], ["a", "b"])
        assert result == {"a": Aggregate(mean=0.0, count=0), "b": Aggregate(mean=0.0, count=0)}

    def test_zero_mean_is_a_real_zero(self):
        result = aggregate([], ["a"])
        assert result["a"].mean == 0
        assert isinstance(result["a"].mean, float)

    def test_mean_is_real_valued(self):
        result = aggregate([("a", 1), ("a", 2)], ["a"])
        assert result["a"].mean == 1.5

    def test_reviews_for_unknown_items_are_ignored(self):
        result = aggregate([("a", 5), ("gone", 10)], ["a"])
        assert set(result) == {"a"}
        assert result["a"] == Aggregate(mean=5.0, count=1)

    def test_items_are_independent(self):
        result = aggregate([("a", 10), ("b", 2), ("a", 6)], ["a", "b", "c"])
        assert result["a"] == Aggregate(mean=8.0, count=2)
        assert result["b"] == Aggregate(mean=2.0, count=1)
        assert result["c"].count == 0

    def test_accepts_generators(self):
        pairs = ((item_id, 4) for item_id in ["a", "a"])
        assert aggregate(pairs, iter(["a"]))["a"].count == 2
