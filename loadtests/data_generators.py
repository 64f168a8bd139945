"""Faker-based data generators for the ratings load test scenarios.

Usernames and locators must be word-character handles, so Faker output is
squashed to ``[A-Za-z0-9_]`` and suffixed to stay unique across users.
"""

import random
import re
import uuid

from faker import Faker

fake = Faker()

_NON_WORD = re.compile(r"\W+")

RATING_MIN = 1
RATING_MAX = 10


def _handle(text: str, limit: int) -> str:
    base = _NON_WORD.sub("_", text).strip("_")[: limit - 9] or "x"
    return f"{base}_{uuid.uuid4().hex[:8]}"


def username() -> str:
    """Handle within the 64-char username limit, e.g. ``jsmith_a1b2c3d4``."""
    return _handle(fake.user_name(), 64)


def register_user_data(is_admin: bool = False) -> dict:
    """RegisterUserRequest payload. The hash is opaque to the service."""
    return {
        "username": username(),
        "password_hash": f"$argon2id$v=19$m=65536,t=3,p=4${fake.sha256()}",
        "is_admin": is_admin,
        "has_avatar": random.random() < 0.3,
    }


def add_item_data() -> dict:
    """AddItemRequest payload with a unique locator."""
    title = fake.catch_phrase()[:255]
    return {
        "locator": _handle(title.lower(), 100),
        "title": title,
        "description": fake.paragraph(nb_sentences=3),
    }


def rating() -> int:
    """Ratings skewed towards the top of the scale, like real reviews."""
    return min(RATING_MAX, max(RATING_MIN, round(random.gauss(7, 2))))


def out_of_bound_rating() -> int:
    return random.choice([RATING_MIN - 1, RATING_MAX + 1, -5, 100])
