"""Centralized error handling framework for bresenham_zip."""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Optional

from .constants import ErrorMessages

logger = logging.getLogger(__name__)


class BresenhamZipError(Exception):
    """Base exception for all bresenham_zip errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class ValidationError(BresenhamZipError):
    """Raised when a zip cannot be constructed from the given input."""

    pass


class ConfigurationError(BresenhamZipError):
    """Raised when configuration is invalid."""

    pass


class InvalidAxisError(ValidationError):
    """The axis is not accepted for the dimensionality of the zip."""

    def __init__(self, axis, dimension: int, accepted):
        accepted_names = ", ".join(a.name for a in accepted)
        super().__init__(
            ErrorMessages.INVALID_AXIS.format(
                axis=axis.name if hasattr(axis, "name") else axis,
                dimension=dimension,
                accepted=accepted_names,
            ),
            details={"axis": axis, "dimension": dimension},
        )
        self.axis = axis
        self.dimension = dimension


class InvalidCoordinateError(ValidationError):
    """The two ending points do not share the value of the zip axis."""

    def __init__(self, axis_name: str, left: int, right: int):
        super().__init__(
            ErrorMessages.INVALID_COORDINATE.format(
                axis=axis_name, left=left, right=right
            ),
            details={"axis": axis_name, "left": left, "right": right},
        )
        self.axis_name = axis_name
        self.left = left
        self.right = right


class MissingAxisError(ValidationError):
    """build() was called before an axis was set."""

    def __init__(self):
        super().__init__(ErrorMessages.MISSING_AXIS)


class MissingPointError(ValidationError):
    """build() was called with one of the three points unset."""

    def __init__(self, field_name: str):
        super().__init__(
            ErrorMessages.MISSING_POINT.format(name=field_name),
            details={"field": field_name},
        )
        self.field_name = field_name


class InvalidPointError(ValidationError):
    """A point does not have the number of coordinates the zip expects."""

    def __init__(self, field_name: str, point, dimension: int):
        super().__init__(
            ErrorMessages.INVALID_POINT.format(
                name=field_name, point=point, dimension=dimension
            ),
            details={"field": field_name, "point": point, "dimension": dimension},
        )
        self.field_name = field_name
        self.point = point
        self.dimension = dimension


class ErrorContext:
    """Context information for error handling."""

    def __init__(self, operation: str, **kwargs):
        self.operation = operation
        self.context = kwargs


@contextmanager
def error_context(operation: str, **context_kwargs):
    """
    Context manager for error handling with operation context.

    Args:
        operation: Description of the operation being performed
        **context_kwargs: Additional context information
    """
    try:
        yield ErrorContext(operation, **context_kwargs)
    except BresenhamZipError as e:
        logger.debug(f"Error during {operation}: {e}")
        e.details.update({"operation": operation, **context_kwargs})
        raise
    except Exception as e:
        logger.error(f"Error during {operation}: {e}", exc_info=True)
        raise
