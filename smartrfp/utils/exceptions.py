"""Exceptions raised by SmartRFP."""


class SmartRFPError(Exception):
    """Base class for SmartRFP errors."""


class DocumentLoadError(SmartRFPError):
    """Raised when text cannot be extracted from an uploaded document."""


class InvalidUploadError(SmartRFPError):
    """Raised when an upload is not an acceptable PDF file."""
