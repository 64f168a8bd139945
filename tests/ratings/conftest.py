import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture
from ratings.utils.logging import clear_context


@pytest.fixture(scope="session")
def ratings_bed():
    from ratings.domain import ratings

    bed = DomainFixture(ratings)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ratings_bed):
    with ratings_bed.domain_context():
        yield

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event store
        current_domain.event_store.store._data_reset()

        clear_context()


@pytest.fixture()
def make_user():
    from ratings.user.registration import RegisterUser

    def _make(username="rater", **overrides):
        payload = {"username": username, "password_hash": "$argon2id$opaque"}
        payload.update(overrides)
        return current_domain.process(RegisterUser(**payload), asynchronous=False)

    return _make


@pytest.fixture()
def make_item():
    from ratings.item.management import AddItem

    def _make(locator="item_a", **overrides):
        payload = {"locator": locator, "title": f"Title of {locator}", "description": "Something worth rating."}
        payload.update(overrides)
        return current_domain.process(AddItem(**payload), asynchronous=False)

    return _make
