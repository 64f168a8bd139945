"""Per-user state tracking for the ratings load test scenarios.

Each Locust user keeps the ids returned by creation endpoints so follow-up
requests can reference them. Nothing is shared between simulated users.
"""

from dataclasses import dataclass, field


@dataclass
class RaterState:
    """One simulated rater and the items they have rated."""

    user_id: str | None = None
    username: str | None = None
    rated: dict[str, int] = field(default_factory=dict)


@dataclass
class CuratorState:
    """An administrator stocking the catalog."""

    item_ids: dict[str, str] = field(default_factory=dict)
