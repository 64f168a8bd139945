"""Ratings load test scenarios.

Stateful SequentialTaskSet journeys: a curator stocking the catalog, a
rater who registers and rates a handful of items (re-rating one of them),
and browsers who only read standings. Every rating write recomputes
standings on the server, so this is the hot path.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import add_item_data, out_of_bound_rating, rating, register_user_data
from loadtests.helpers.state import CuratorState, RaterState


def _known_locators(client) -> list[str]:
    with client.get("/items", catch_response=True, name="GET /items") as resp:
        if resp.status_code != 200:
            resp.failure(f"List standings failed: {resp.status_code}")
            return []
        return [standing["locator"] for standing in resp.json()]


class CatalogCuratorJourney(SequentialTaskSet):
    """Add a few items, then check they appear in the standings."""

    def on_start(self):
        self.state = CuratorState()

    @task
    def add_items(self):
        for _ in range(3):
            payload = add_item_data()
            with self.client.post("/items", json=payload, catch_response=True, name="POST /items") as resp:
                if resp.status_code == 201:
                    self.state.item_ids[payload["locator"]] = resp.json()["item_id"]
                else:
                    resp.failure(f"Add item failed: {resp.status_code}")

    @task
    def check_standings(self):
        listed = set(_known_locators(self.client))
        missing = set(self.state.item_ids) - listed
        if missing:
            self.client.get("/items", name="GET /items (recheck)")

    @task
    def done(self):
        self.interrupt()


class RaterJourney(SequentialTaskSet):
    """Register -> rate items -> change one rating -> read own ratings."""

    def on_start(self):
        self.state = RaterState()

    @task
    def register(self):
        payload = register_user_data()
        with self.client.post("/users", json=payload, catch_response=True, name="POST /users") as resp:
            if resp.status_code == 201:
                self.state.user_id = resp.json()["user_id"]
                self.state.username = payload["username"]
            else:
                resp.failure(f"Register failed: {resp.status_code}")
                self.interrupt()

    @task
    def rate_items(self):
        locators = _known_locators(self.client)
        for locator in random.sample(locators, k=min(4, len(locators))):
            value = rating()
            with self.client.put(
                f"/items/{locator}/rating",
                json={"user_id": self.state.user_id, "rating": value},
                catch_response=True,
                name="PUT /items/{locator}/rating",
            ) as resp:
                if resp.status_code == 200:
                    self.state.rated[locator] = value
                elif resp.status_code == 404:
                    # Item removed by another user in the meantime
                    resp.success()
                else:
                    resp.failure(f"Rate failed: {resp.status_code}")

    @task
    def change_mind(self):
        if not self.state.rated:
            return
        locator = random.choice(list(self.state.rated))
        with self.client.put(
            f"/items/{locator}/rating",
            json={"user_id": self.state.user_id, "rating": rating()},
            catch_response=True,
            name="PUT /items/{locator}/rating (re-rate)",
        ) as resp:
            if resp.status_code not in (200, 404):
                resp.failure(f"Re-rate failed: {resp.status_code}")

    @task
    def rejected_rating(self):
        if not self.state.rated:
            return
        locator = next(iter(self.state.rated))
        with self.client.put(
            f"/items/{locator}/rating",
            json={"user_id": self.state.user_id, "rating": out_of_bound_rating()},
            catch_response=True,
            name="PUT /items/{locator}/rating (invalid)",
        ) as resp:
            if resp.status_code in (400, 404):
                resp.success()
            else:
                resp.failure(f"Out-of-bound rating accepted: {resp.status_code}")

    @task
    def own_ratings(self):
        self.client.get(f"/users/{self.state.username}/ratings", name="GET /users/{username}/ratings")
        self.client.get(f"/hues/{self.state.username}", name="GET /hues/{username}")

    @task
    def done(self):
        self.interrupt()


class StandingsBrowserJourney(SequentialTaskSet):
    """Read-only traffic: standings list, one item, its ratings."""

    @task
    def browse(self):
        locators = _known_locators(self.client)
        if not locators:
            self.interrupt()
            return
        locator = random.choice(locators)
        self.client.get(f"/items/{locator}", name="GET /items/{locator}")
        self.client.get(f"/items/{locator}/ratings", name="GET /items/{locator}/ratings")

    @task
    def done(self):
        self.interrupt()


class RatingsUser(HttpUser):
    """Mixed workload, weighted towards reads with a steady stream of ratings."""

    wait_time = between(0.5, 3.0)
    tasks = {
        StandingsBrowserJourney: 6,
        RaterJourney: 5,
        CatalogCuratorJourney: 1,
    }
