"""Ratings bounded context — Items, Users, Reviews and Standings.

Handles the rating lifecycle (one review per user per item, upserted on
resubmission), cascading removal of items and users, and the read-side
computation of item standings (mean score, review count, score rank and
popularity rank).
"""

from protean.domain import Domain

from ratings.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
ratings = Domain(name="ratings")
