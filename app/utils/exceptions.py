"""
Custom Exception Hierarchy

Provides specific exception types for the plasma rule service
with structured error information.
"""
from typing import Optional, Dict, Any


class PlasmaError(Exception):
    """Base exception for all plasma rule service errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class RuleConfigurationError(PlasmaError):
    """Errors in a rule table handed to the engine."""

    def __init__(
        self,
        message: str,
        rule_id: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="RULE_CONFIGURATION_ERROR",
            details={"rule_id": rule_id, **(details or {})}
        )
        self.rule_id = rule_id


class MeasurementValidationError(PlasmaError):
    """Measurement input that cannot be interpreted at the API boundary."""

    def __init__(
        self,
        message: str,
        field: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="MEASUREMENT_VALIDATION_ERROR",
            details={"field": field, **(details or {})}
        )
        self.field = field
