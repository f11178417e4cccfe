"""Translation of database errors into domain errors."""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from campus.domain.error import ConcurrentUpdateError, StoreUnavailableError

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def _sqlstate(error: IntegrityError) -> str | None:
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


@contextmanager
def store_errors(resource: str, identifier: object = "") -> Iterator[None]:
    """Translate SQLAlchemy errors raised inside the block.

    A unique violation means another writer inserted the same key first and
    becomes ConcurrentUpdateError, so the caller's sequence is retried. Any
    other database failure becomes StoreUnavailableError.

    Args:
        resource: Resource name for the error
        identifier: Resource identifier for the error
    """
    try:
        yield
    except IntegrityError as e:
        if _sqlstate(e) == UNIQUE_VIOLATION:
            raise ConcurrentUpdateError(resource, str(identifier)) from e
        logfire.error(
            "Integrity error", resource=resource, identifier=str(identifier), error=str(e)
        )
        raise StoreUnavailableError() from e
    except SQLAlchemyError as e:
        logfire.error(
            "Database error", resource=resource, identifier=str(identifier), error=str(e)
        )
        raise StoreUnavailableError() from e
