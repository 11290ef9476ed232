"""Constants and enums for bresenham_zip to eliminate magic strings and values."""

from enum import Enum
from typing import List


class OutputFormat(Enum):
    """Formats the command line can render pairs in."""

    TEXT = "text"
    JSON = "json"


class PointNames:
    """Human readable names of the three builder points, in validation order."""

    START = "starting point"
    FIRST_END = "first ending point"
    SECOND_END = "second ending point"


class Dimensions:
    """Supported dimensionalities."""

    PLANE = 2
    SPACE = 3


class ConfigSections:
    """Configuration section names."""

    LOGGING = "logging"
    OUTPUT = "output"


class ErrorMessages:
    """Standard error messages."""

    # Validation errors
    INVALID_AXIS = "Invalid axis {axis} for a {dimension}D zip. Accepted axes: {accepted}"
    INVALID_COORDINATE = (
        "Invalid {axis}. Both values must have the same {axis} ({left} != {right})"
    )
    MISSING_AXIS = "Missing axis. An axis must be specified before building"
    MISSING_POINT = "Missing {name}. All three points must be specified"
    INVALID_POINT = "Invalid {name} {point}. Expected {dimension} coordinates"
    DIMENSION_MISMATCH = "Points must have the same dimension ({left} != {right})"
    UNSUPPORTED_DIMENSION = "Unsupported dimension {dimension}. Points must be 2D or 3D"
    UNKNOWN_AXIS_NAME = "Unknown axis name: {name}. Must be one of: {valid}"

    # Configuration errors
    INVALID_CONFIG_VALUE = "Invalid configuration value for {key}: {value}"
    CONFIG_LOAD_FAILED = "Failed to load configuration from {path}: {error}"
    NOT_A_TABLE = "Configuration section '{section}' must be a table, got {value!r}"


class LogMessages:
    """Standard log messages."""

    ZIP_CREATED = "Created {name} from {start} to {end_a} / {end_b} along {axis}"
    TERMINAL_PAIR = "Terminal pair {pair} reached at goal {goal}"
    ZIP_EXHAUSTED = "{name} exhausted"


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_valid_output_formats() -> List[str]:
    """Get list of valid output format strings."""
    return [fmt.value for fmt in OutputFormat]
