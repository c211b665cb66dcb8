class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class PaymentDeclinedError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 402)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class SoldOutError(ConflictError):
    pass


class DuplicateReferenceError(ConflictError):
    """Raised by the ticket store when a reference number is already taken."""

    def __init__(self, reference_number: str) -> None:
        self.reference_number = reference_number
        super().__init__(f'Reference number already in use: {reference_number}')


class ReferenceAllocationError(CustomBaseError):
    def __init__(self, message: str = 'Could not allocate ticket reference number') -> None:
        super().__init__(message, 503)
