"""Custom exceptions for the report formatter."""

class ReportError(Exception):
    """Base exception for report formatting errors."""
    pass

class InvalidInputError(ReportError):
    """Exception for empty or unusable input text."""
    pass

class SinkError(ReportError):
    """Exception for failures raised by a rendering sink mid-stream."""
    pass

class GenerationError(ReportError):
    """Exception for report text generation errors."""
    pass

class ModelError(GenerationError):
    """Exception for model-related errors."""
    pass
