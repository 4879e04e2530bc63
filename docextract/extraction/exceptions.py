class ExtractionError(Exception):
    """Base exception for model extraction failures."""


class ModelError(ExtractionError):
    """Raised when the model call fails or returns no text payload."""


class ModelNetworkError(ModelError):
    """Raised when the provider call fails due to network/infrastructure issues."""


class ParseError(ExtractionError):
    """Raised when the model output is not syntactically valid JSON."""
