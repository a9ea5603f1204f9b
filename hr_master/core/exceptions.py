from typing import Any, Dict, Optional

class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

class NotFoundError(AppException):
    def __init__(self, message: str = "Resource not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details
        )

class ValidationFailure(AppException):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=422,
            error_code="VALIDATION_FAILED",
            details=details
        )

class ConstraintViolation(AppException):
    """Raised when the store rejects a write because of a uniqueness or key constraint."""
    def __init__(self, message: str = "Record conflicts with an existing one"):
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONSTRAINT_VIOLATION"
        )

class InvalidTransition(AppException):
    """Raised when a leave that already reached a terminal status is re-decided the other way."""
    def __init__(self, current: str, requested: str):
        super().__init__(
            message=f"Leave is already {current} and cannot be {requested.lower()}",
            status_code=409,
            error_code="INVALID_TRANSITION",
            details={"current": current, "requested": requested}
        )

class StoreUnavailable(AppException):
    def __init__(self, message: str = "Database is unavailable"):
        super().__init__(
            message=message,
            status_code=503,
            error_code="STORE_UNAVAILABLE"
        )
