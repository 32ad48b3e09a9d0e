"""Exception hierarchy for the property expense calculator."""


class PropertyCalculatorError(Exception):
    """Base exception for all property calculator errors."""


class ConfigurationError(PropertyCalculatorError):
    """Raised when configuration is invalid."""


class StorageError(PropertyCalculatorError):
    """Raised when the portfolio cannot be written."""


class PropertyNotFoundError(StorageError):
    """Raised when no stored property has the requested id."""


class ReportError(PropertyCalculatorError):
    """Raised when a report cannot be exported."""
