class AppError(Exception):
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class NotFoundError(AppError):
    def __init__(self, resource: str, resource_id: str | int):
        super().__init__(f"{resource} '{resource_id}' not found", code="NOT_FOUND")


class ValidationError(AppError):
    def __init__(self, message: str, field: str | None = None, code: str = "VALIDATION_ERROR"):
        self.field = field
        super().__init__(message, code=code)


class InvalidPeriodError(ValidationError):
    def __init__(self, value: str, allowed: list[str]):
        super().__init__(
            f"Invalid period '{value}'. Expected one of: {', '.join(allowed)}",
            field="period",
            code="INVALID_PERIOD",
        )


class InvalidRangeError(ValidationError):
    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, field=field, code="INVALID_RANGE")


class ConflictError(AppError):
    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")


class UnauthorizedError(AppError):
    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, code="UNAUTHORIZED")


class ForbiddenError(AppError):
    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, code="FORBIDDEN")


class AggregationFailure(AppError):
    def __init__(self, message: str = "Failed to compute statistics"):
        super().__init__(message, code="AGGREGATION_FAILURE")
