"""Unified exception hierarchy for memory-coach."""


class MemoryCoachError(Exception):
    """Base exception for all memory-coach errors."""


# Configuration
class ConfigurationError(MemoryCoachError):
    """Invalid or unusable configuration value."""


# Providers
class ProviderError(MemoryCoachError):
    """Base exception for text-generation provider calls."""


class ProviderNotConfiguredError(ProviderError):
    """Provider was invoked without a usable credential or implementation."""


class ProviderTimeoutError(ProviderError):
    """Provider call exceeded the configured request timeout."""


class ProviderResponseError(ProviderError):
    """Provider answered with an error status or an unreadable payload."""


# Visits
class VisitError(MemoryCoachError):
    """Base exception for page visit operations."""


class VisitValidationError(VisitError):
    """A raw visit payload is missing required fields."""


class VisitNotFoundError(VisitError):
    """No stored visit has the requested id."""
