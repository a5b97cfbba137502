"""
Storage-level errors.

Driver exceptions raised through SQLAlchemy are translated into a single
StorageError carrying a PostgreSQL SQLSTATE code. Drivers that do not
report SQLSTATE codes (SQLite in tests and local development) get one
inferred from the error message.
"""

from sqlalchemy import exc as sa_exc

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
NOT_NULL_VIOLATION = "23502"
CONNECTION_FAILURE = "08001"

# SQLSTATE class 08: connection exceptions.
CONNECTION_EXCEPTION_CLASS = "08"

_INTEGRITY_MARKERS = (
    ("unique constraint", UNIQUE_VIOLATION),
    ("foreign key constraint", FOREIGN_KEY_VIOLATION),
    ("not null constraint", NOT_NULL_VIOLATION),
)

_CONNECTIVITY_MARKERS = (
    "connection refused",
    "could not connect",
    "could not translate host name",
    "name or service not known",
    "connection to server",
    "server closed the connection",
    "unable to open database file",
)


class StorageError(Exception):
    """Raised when the relational store rejects or cannot run a statement.

    Attributes:
        code: SQLSTATE code, or None when the failure has no known code.
        message: Driver message.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)

    @property
    def is_connection_failure(self) -> bool:
        return bool(self.code) and self.code.startswith(CONNECTION_EXCEPTION_CLASS)


def _infer_code(error: sa_exc.DBAPIError, text: str) -> str | None:
    if isinstance(error, sa_exc.IntegrityError):
        for marker, code in _INTEGRITY_MARKERS:
            if marker in text:
                return code
        return None

    if error.connection_invalidated:
        return CONNECTION_FAILURE
    if isinstance(error, (sa_exc.OperationalError, sa_exc.InterfaceError)):
        if any(marker in text for marker in _CONNECTIVITY_MARKERS):
            return CONNECTION_FAILURE
    return None


def translate_driver_error(error: sa_exc.DBAPIError) -> StorageError:
    """Build a StorageError from a SQLAlchemy-wrapped driver exception.

    Args:
        error: The exception raised by SQLAlchemy.

    Returns:
        A StorageError with the driver's SQLSTATE when available.
    """
    original = error.orig
    message = str(original) if original is not None else str(error)

    code = getattr(original, "pgcode", None)
    if not code:
        code = _infer_code(error, message.lower())

    return StorageError(message=message, code=code)
