# fitcheck/core/errors.py
"""
Taxonomia de erros do motor de check-in.

Cada tipo carrega um ``code`` estável e um ``status_code`` sugerido; quem faz o
mapeamento para HTTP é a camada de API (ver ``fitcheck.main``).
"""
from __future__ import annotations


class DomainError(Exception):
    code = "DOMAIN_ERROR"
    status_code = 400
    default_message = "Domain rule violated"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(DomainError):
    code = "NOT_FOUND"
    status_code = 404
    default_message = "Resource not found"


class OutOfRangeError(DomainError):
    code = "OUT_OF_RANGE"
    status_code = 422
    default_message = "User is too far from the location to check in"


class DuplicateForDayError(DomainError):
    code = "DUPLICATE_FOR_DAY"
    status_code = 409
    default_message = "User can only check in once per day"


class AlreadyValidatedError(DomainError):
    code = "ALREADY_VALIDATED"
    status_code = 409
    default_message = "Check-in has already been validated"


class UnauthorizedError(DomainError):
    code = "UNAUTHORIZED"
    status_code = 403
    default_message = "Unauthorized access"


class TooEarlyError(DomainError):
    code = "TOO_EARLY"
    status_code = 422
    default_message = "Check-in can only be validated after 20 minutes"


class InvalidArgumentError(DomainError):
    code = "INVALID_ARGUMENT"
    status_code = 400
    default_message = "Invalid argument"


class MissingCoordinatesError(InvalidArgumentError):
    default_message = "Distance sorting requires user coordinates"


class InvalidDateRangeError(InvalidArgumentError):
    default_message = "Start date must be before end date"


class StoreConflictError(Exception):
    """Sinal do store: constraint única ou update condicional perdeu a corrida."""
