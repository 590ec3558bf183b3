"""
EconoTrends - Custom Exceptions.

Centralized exception handling with standardized error responses.
"""

from typing import Any


class EconoTrendsException(Exception):
    """Base exception for EconoTrends application."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class IndicatorNotFoundException(EconoTrendsException):
    """Raised when an indicator id is not in the catalog."""

    def __init__(self, indicator_id: str):
        super().__init__(
            code="INDICATOR_NOT_FOUND",
            message=f"Indicator not found: {indicator_id}",
            status_code=404,
            details={"indicator": indicator_id},
        )


class InvalidParameterException(EconoTrendsException):
    """Raised when a request parameter is outside its allowed bounds."""

    def __init__(self, parameter: str, constraint: str, value: Any = None):
        details: dict[str, Any] = {"parameter": parameter, "constraint": constraint}
        if value is not None:
            details["value"] = value
        super().__init__(
            code="INVALID_PARAMETER",
            message=f"Invalid parameter '{parameter}': must satisfy {constraint}",
            status_code=400,
            details=details,
        )


class InsufficientDataException(EconoTrendsException):
    """Raised when a series is too short for the requested operation."""

    def __init__(self, operation: str, required: int, available: int):
        super().__init__(
            code="INSUFFICIENT_DATA",
            message=f"{operation} requires at least {required} data point(s), got {available}",
            status_code=422,
            details={"operation": operation, "required": required, "available": available},
        )


class NumericDegenerateException(EconoTrendsException):
    """Raised by numeric helpers on a zero denominator. Always handled by the caller."""

    def __init__(self, quantity: str):
        super().__init__(
            code="NUMERIC_DEGENERATE",
            message=f"Degenerate denominator while computing {quantity}",
            status_code=500,
            details={"quantity": quantity},
        )


class FeatureDisabledException(EconoTrendsException):
    """Raised when a feature flag is disabled."""

    def __init__(self, feature_name: str):
        super().__init__(
            code="FEATURE_DISABLED",
            message=f"Feature '{feature_name}' is currently disabled",
            status_code=503,
            details={"feature": feature_name},
        )
