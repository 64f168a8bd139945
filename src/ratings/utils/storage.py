"""Translation of storage-layer failures into Ratings errors.

Failures reach the caller in three shapes: a bare SQLAlchemy error, a
Protean ``TransactionError`` chained from one when the unit of work fails
at commit, and Protean's own uniqueness ``ValidationError`` when a new
aggregate reuses an identity that is already stored.
"""

from contextlib import contextmanager

from protean.exceptions import TransactionError, ValidationError
from sqlalchemy.exc import IntegrityError, OperationalError

from ratings.exceptions import ConflictError, StorageUnavailable

_ALREADY_PRESENT = "is already present"


def _sqlalchemy_cause(exc: BaseException):
    """First SQLAlchemy integrity/operational error in ``exc``'s cause chain."""
    seen = set()
    while exc is not None and id(exc) not in seen:
        if isinstance(exc, (IntegrityError, OperationalError)):
            return exc
        seen.add(id(exc))
        exc = exc.__cause__ or exc.__context__
    return None


def _is_duplicate_identity(exc: ValidationError, field: str) -> bool:
    messages = getattr(exc, "messages", None)
    if not isinstance(messages, dict):
        return False
    return any(_ALREADY_PRESENT in str(message) for message in messages.get(field, []))


def _translate(cause):
    if isinstance(cause, IntegrityError):
        return ConflictError(str(cause.orig))
    return StorageUnavailable(str(cause.orig))


@contextmanager
def storage_errors(conflict_on: str | None = None):
    """Re-raise storage failures as ``ConflictError`` / ``StorageUnavailable``.

    ``conflict_on`` names an identity field whose "already present" uniqueness
    error is a lost insert race rather than bad input.
    """
    try:
        yield
    except (IntegrityError, OperationalError) as exc:
        raise _translate(exc) from exc
    except TransactionError as exc:
        cause = _sqlalchemy_cause(exc.__cause__ or exc.__context__)
        if cause is None:
            raise
        raise _translate(cause) from exc
    except ValidationError as exc:
        if conflict_on and _is_duplicate_identity(exc, conflict_on):
            raise ConflictError(str(exc.messages[conflict_on][0])) from exc
        raise
