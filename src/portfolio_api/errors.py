"""Domain errors raised by repositories, the token service and guards.

Every error carries the HTTP status it maps to so the API layer can
render it without knowing which component raised it.
"""

from __future__ import annotations

from typing import TypedDict

__all__ = [
    "AlreadyExists",
    "ConfigurationError",
    "FieldError",
    "Forbidden",
    "InvalidCredentials",
    "InvalidToken",
    "NotFound",
    "PortfolioError",
    "StorageError",
    "Unauthorized",
    "ValidationError",
]


class FieldError(TypedDict):
    """A single field-level validation message."""

    field: str
    message: str


class PortfolioError(Exception):
    """Base class for errors that surface to API clients."""

    status_code = 500
    default_message = "Error del servidor"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PortfolioError):
    """Input failed field validation; nothing was written."""

    status_code = 400
    default_message = "Datos inválidos"

    def __init__(self, errors: list[FieldError], message: str | None = None) -> None:
        super().__init__(message)
        self.errors = errors

    @classmethod
    def single(cls, field: str, message: str) -> ValidationError:
        return cls([{"field": field, "message": message}])


class InvalidCredentials(PortfolioError):
    status_code = 401
    default_message = "Credenciales inválidas"


class Unauthorized(PortfolioError):
    status_code = 401
    default_message = "No autorizado. Token requerido"


class InvalidToken(Unauthorized):
    """Token is malformed, badly signed, or expired."""

    default_message = "Token inválido o expirado"


class Forbidden(PortfolioError):
    status_code = 403
    default_message = "Acceso denegado. Se requieren permisos de administrador"


class NotFound(PortfolioError):
    status_code = 404
    default_message = "Recurso no encontrado"


class AlreadyExists(PortfolioError):
    status_code = 409
    default_message = "Ya existe un usuario administrador"


class StorageError(PortfolioError):
    """The database could not be reached or refused the operation."""

    status_code = 503
    default_message = "Base de datos no disponible"


class ConfigurationError(RuntimeError):
    """Required configuration is missing; the service refuses to start."""
