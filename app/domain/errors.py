# app/domain/errors.py


class ServiceError(Exception):
    """Bazowy blad warstwy serwisow, router mapuje go na status HTTP."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = 400


class UnauthorizedError(ServiceError):
    status_code = 401


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    status_code = 409


class InternalFailure(ServiceError):
    status_code = 500
