"""Application error types."""


class NutriAIError(Exception):
    """Base class for errors surfaced to API clients."""


class ValidationError(NutriAIError):
    """Raised when request data is missing or malformed."""


class UpstreamFailure(NutriAIError):
    """Raised when a request cannot be completed due to an internal failure."""


class UnsupportedUploadError(UpstreamFailure):
    """Raised when an uploaded file is not an accepted image."""
