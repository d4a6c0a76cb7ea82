from typing import Optional

from fastapi import HTTPException, status

from vehicle_registry.core.config import settings
from vehicle_registry.core.validation import FieldError

DUPLICATE_FIELD_LABELS = {
    "phoneNumber": "Phone number",
    "carNumber": "Car number",
}


class RecordValidationException(HTTPException):
    def __init__(self, errors: list[FieldError], message: Optional[str] = None):
        self.errors = errors
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message or errors[0].message,
        )


class DuplicateFieldException(RecordValidationException):
    def __init__(self, field: str):
        self.field = field
        message = f"{DUPLICATE_FIELD_LABELS.get(field, field)} already exists"
        super().__init__([FieldError(field=field, message=message)], message)


class RecordNotFoundException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Record not found",
        )


class ApiEndpointNotFoundException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="API endpoint not found",
        )


class ServerFailureException(HTTPException):
    """Generic 500; the underlying error text is only exposed outside production."""

    def __init__(self, message: str, error: Optional[Exception] = None):
        self.error = None
        if error is not None and not settings.is_production:
            self.error = str(error)
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
        )


class StoreUnavailableException(ServerFailureException):
    def __init__(self, error: Optional[Exception] = None):
        super().__init__("Database is not available", error)
