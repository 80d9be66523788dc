"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    PlasmaError,
    RuleConfigurationError,
    MeasurementValidationError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "PlasmaError",
    "RuleConfigurationError",
    "MeasurementValidationError",
]
