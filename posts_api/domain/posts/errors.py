"""
Domain-specific errors for the posts bounded context.

All errors raised from the domain and application layers are defined here.
Each error carries an ErrorKind; the kind alone decides the HTTP status.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Category of a domain failure and its fixed HTTP status."""

    VALIDATION = ("validation", 400)
    UNAUTHORIZED = ("unauthorized", 401)
    FORBIDDEN = ("forbidden", 403)
    NOT_FOUND = ("not_found", 404)

    def __init__(self, code: str, http_status: int) -> None:
        self.code = code
        self.http_status = http_status


class DomainError(Exception):
    """Base error for all posts domain errors.

    Attributes:
        kind: Failure category. Determines ``http_status``.
        message: Human-readable message returned to the client.
        errors: Field-level messages, in the order they were found.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        errors: tuple[str, ...] = (),
    ) -> None:
        self.kind = kind
        self.message = message
        self.errors = tuple(errors)
        super().__init__(self.message)

    @property
    def http_status(self) -> int:
        return self.kind.http_status

    @property
    def status(self) -> str:
        """Envelope status: "fail" for client errors, "error" otherwise."""
        return "fail" if str(self.http_status).startswith("4") else "error"


class ValidationError(DomainError):
    """Raised when input data breaks one or more business rules."""

    def __init__(
        self, message: str = "Dados inválidos", errors: list[str] | tuple[str, ...] = ()
    ) -> None:
        super().__init__(ErrorKind.VALIDATION, message, tuple(errors))


class NotFoundError(DomainError):
    """Raised when the requested resource does not exist."""

    def __init__(self, message: str = "Recurso não encontrado") -> None:
        super().__init__(ErrorKind.NOT_FOUND, message)


class UnauthorizedError(DomainError):
    """Raised when the caller is not authenticated."""

    def __init__(self, message: str = "Não autorizado") -> None:
        super().__init__(ErrorKind.UNAUTHORIZED, message)


class ForbiddenError(DomainError):
    """Raised when the caller may not access the resource."""

    def __init__(self, message: str = "Acesso proibido") -> None:
        super().__init__(ErrorKind.FORBIDDEN, message)
