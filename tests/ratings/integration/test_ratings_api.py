"""Integration tests for the Ratings API endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.core.unit_of_work import UnitOfWork
from protean.exceptions import TransactionError
from ratings.api import hue_router, item_router, register_error_handlers, user_router
from sqlalchemy.exc import IntegrityError, OperationalError


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(user_router)
    app.include_router(item_router)
    app.include_router(hue_router)
    register_error_handlers(app)
    return TestClient(app)


def _register(client, username="rater", **overrides):
    payload = {"username": username, "password_hash": "$argon2id$opaque"}
    payload.update(overrides)
    response = client.post("/users", json=payload)
    assert response.status_code == 201
    return response.json()["user_id"]


def _add_item(client, locator="item_a", **overrides):
    payload = {"locator": locator, "title": f"Title of {locator}", "description": "Worth a rating."}
    payload.update(overrides)
    response = client.post("/items", json=payload)
    assert response.status_code == 201
    return response.json()["item_id"]


def _rate(client, locator, user_id, rating):
    return client.put(f"/items/{locator}/rating", json={"user_id": user_id, "rating": rating})


class TestUsersAPI:
    def test_register_returns_201(self, client):
        response = client.post("/users", json={"username": "api_user", "password_hash": "x"})
        assert response.status_code == 201
        assert "user_id" in response.json()

    def test_illegal_username_returns_400(self, client):
        response = client.post("/users", json={"username": "not legal", "password_hash": "x"})
        assert response.status_code == 400

    def test_duplicate_username_returns_400(self, client):
        _register(client, "twice")
        response = client.post("/users", json={"username": "twice", "password_hash": "x"})
        assert response.status_code == 400

    def test_user_card_has_hue(self, client):
        _register(client, "admin", is_admin=True)
        response = client.get("/users/admin")
        assert response.status_code == 200
        body = response.json()
        assert body["avatar_hue"] == 203
        assert body["is_admin"] is True

    def test_unknown_user_returns_404(self, client):
        assert client.get("/users/ghost").status_code == 404

    def test_set_avatar(self, client):
        user_id = _register(client, "pictured")
        response = client.put(f"/users/{user_id}/avatar", json={"has_avatar": True})
        assert response.status_code == 200
        assert client.get("/users/pictured").json()["has_avatar"] is True

    def test_delete_user_cascades(self, client):
        _add_item(client, "item_a")
        leaving = _register(client, "leaving")
        staying = _register(client, "staying")
        _rate(client, "item_a", leaving, 2)
        _rate(client, "item_a", staying, 10)

        assert client.delete(f"/users/{leaving}").status_code == 200

        standing = client.get("/items/item_a").json()
        assert standing["review_count"] == 1
        assert standing["score"] == 10.0


class TestItemsAPI:
    def test_add_returns_201(self, client):
        response = client.post("/items", json={"locator": "new_item", "title": "New", "description": "Fresh."})
        assert response.status_code == 201

    def test_illegal_locator_returns_400(self, client):
        response = client.post("/items", json={"locator": "bad/slug", "title": "Bad", "description": "Nope."})
        assert response.status_code == 400

    def test_unrated_item_standing(self, client):
        item_id = _add_item(client, "quiet")
        body = client.get("/items/quiet").json()
        assert body == {
            "item_id": item_id,
            "locator": "quiet",
            "title": "Title of quiet",
            "description": "Worth a rating.",
            "score": 0.0,
            "review_count": 0,
            "rank": 1,
            "popularity": 1,
        }

    def test_unknown_item_returns_404(self, client):
        assert client.get("/items/missing").status_code == 404

    def test_list_is_sorted_by_score(self, client):
        user_id = _register(client)
        for locator, rating in (("item_low", 2), ("item_high", 9), ("item_mid", 5)):
            _add_item(client, locator)
            _rate(client, locator, user_id, rating)

        response = client.get("/items")
        assert response.status_code == 200
        assert [s["locator"] for s in response.json()] == ["item_high", "item_mid", "item_low"]
        assert [s["rank"] for s in response.json()] == [1, 2, 3]

    def test_delete_item_cascades(self, client):
        item_id = _add_item(client, "doomed")
        user_id = _register(client, "fan")
        _rate(client, "doomed", user_id, 7)

        assert client.delete(f"/items/{item_id}").status_code == 200
        assert client.get("/items/doomed").status_code == 404
        assert client.get("/users/fan/ratings").json() == []


class TestRatingAPI:
    def test_put_rating_returns_standing(self, client):
        _add_item(client, "item_a")
        first = _register(client, "first")
        second = _register(client, "second")

        _rate(client, "item_a", first, 9)
        response = _rate(client, "item_a", second, 8)

        assert response.status_code == 200
        assert response.json()["score"] == 8.5
        assert response.json()["review_count"] == 2

    def test_resubmission_overwrites(self, client):
        _add_item(client, "item_a")
        user_id = _register(client)
        _rate(client, "item_a", user_id, 3)
        response = _rate(client, "item_a", user_id, 6)

        assert response.json()["score"] == 6.0
        assert response.json()["review_count"] == 1
        assert client.get("/items/item_a/rating", params={"user_id": user_id}).json() == {"rating": 6}

    def test_out_of_bound_rating_returns_400(self, client):
        _add_item(client, "item_a")
        user_id = _register(client)
        assert _rate(client, "item_a", user_id, 11).status_code == 400
        assert _rate(client, "item_a", user_id, 0).status_code == 400

    def test_rating_unknown_item_returns_404(self, client):
        user_id = _register(client)
        assert _rate(client, "missing", user_id, 5).status_code == 404

    def test_rating_by_unknown_user_returns_404(self, client):
        _add_item(client, "item_a")
        assert _rate(client, "item_a", "no-such-user", 5).status_code == 404

    def test_withdraw(self, client):
        _add_item(client, "item_a")
        user_id = _register(client)
        _rate(client, "item_a", user_id, 4)

        response = client.delete("/items/item_a/rating", params={"user_id": user_id})
        assert response.status_code == 200
        assert client.get("/items/item_a/rating", params={"user_id": user_id}).json() == {"rating": None}

    def test_item_ratings_list_authors(self, client):
        _add_item(client, "item_a")
        user_id = _register(client, "critic")
        _rate(client, "item_a", user_id, 7)

        entries = client.get("/items/item_a/ratings").json()
        assert len(entries) == 1
        assert entries[0]["rating"] == 7
        assert entries[0]["user"]["username"] == "critic"

    def test_user_ratings_carry_standing(self, client):
        _add_item(client, "item_a")
        user_id = _register(client, "critic")
        _rate(client, "item_a", user_id, 7)

        entries = client.get("/users/critic/ratings").json()
        assert entries[0]["item"]["locator"] == "item_a"
        assert entries[0]["item"]["rank"] == 1


class TestHueAPI:
    def test_hue_needs_no_user(self, client):
        assert client.get("/hues/admin").json() == {"username": "admin", "hue": 203}


def _fail_commits(monkeypatch, error):
    def commit(self):
        try:
            raise error
        except type(error) as exc:
            raise TransactionError("Unit of Work commit failed") from exc

    monkeypatch.setattr(UnitOfWork, "commit", commit)


def _outage():
    return OperationalError("COMMIT", {}, Exception("server closed the connection"))


class TestErrorResponses:
    def test_unknown_item_is_404_with_body(self, client):
        response = client.get("/items/missing")
        assert response.status_code == 404
        assert "error" in response.json()

    def test_unknown_item_ratings_is_404(self, client):
        assert client.get("/items/missing/ratings").status_code == 404

    def test_unknown_user_ratings_is_404(self, client):
        assert client.get("/users/ghost/ratings").status_code == 404

    def test_add_item_during_outage_is_503(self, client, monkeypatch):
        _fail_commits(monkeypatch, _outage())
        response = client.post("/items", json={"locator": "item_a", "title": "A", "description": "Text."})
        assert response.status_code == 503
        assert response.headers["Retry-After"] == "1"

    def test_register_during_outage_is_503(self, client, monkeypatch):
        _fail_commits(monkeypatch, _outage())
        response = client.post("/users", json={"username": "late", "password_hash": "x"})
        assert response.status_code == 503
        assert response.headers["Retry-After"] == "1"

    def test_set_avatar_during_outage_is_503(self, client, monkeypatch):
        user_id = _register(client, "pictured")
        _fail_commits(monkeypatch, _outage())
        response = client.put(f"/users/{user_id}/avatar", json={"has_avatar": True})
        assert response.status_code == 503

    def test_rating_during_outage_is_503(self, client, monkeypatch):
        _add_item(client, "item_a")
        user_id = _register(client)
        _fail_commits(monkeypatch, _outage())
        response = _rate(client, "item_a", user_id, 5)
        assert response.status_code == 503
        assert response.headers["Retry-After"] == "1"

    def test_username_collision_at_commit_is_409(self, client, monkeypatch):
        _fail_commits(monkeypatch, IntegrityError("INSERT INTO user", {}, Exception("duplicate key value")))
        response = client.post("/users", json={"username": "racer", "password_hash": "x"})
        assert response.status_code == 409
