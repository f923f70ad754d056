"""Translation of SQLAlchemy failures into domain errors."""

from sqlalchemy import exc as sa_exc

from gossip.domain.error import TransientStoreError

FOREIGN_KEY_VIOLATION = "23503"

# Failures that say nothing about the request and may succeed on retry
TRANSIENT_ERRORS = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.TimeoutError,  # Connection pool exhausted
)


def is_foreign_key_violation(error: sa_exc.IntegrityError) -> bool:
    """Whether an integrity error was raised by a foreign key constraint."""
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == FOREIGN_KEY_VIOLATION
    # SQLite reports constraint failures by message only
    return "FOREIGN KEY" in str(orig).upper()


def as_transient(error: Exception) -> TransientStoreError | None:
    """Map a store failure to TransientStoreError, or None if not transient."""
    if isinstance(error, TRANSIENT_ERRORS):
        return TransientStoreError(f"Store unavailable: {error}")
    if isinstance(error, sa_exc.DBAPIError) and error.connection_invalidated:
        return TransientStoreError(f"Connection lost: {error}")
    return None
