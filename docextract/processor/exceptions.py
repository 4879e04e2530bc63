class ProcessorError(Exception):
    """Base exception for all batch processing errors."""


class EncodingError(ProcessorError):
    """Raised when a source file cannot be read into a transport payload."""


class EmptyBatchError(ProcessorError):
    """Raised when a batch is started without any files."""
