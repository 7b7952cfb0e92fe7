"""Custom exception types for clearer error handling."""

class ArchiveToolError(Exception):
    """Base exception for the tool."""

class ValidationError(ArchiveToolError):
    """Raised when arguments or inputs are missing or malformed."""

class NotFoundError(ArchiveToolError):
    """Raised when an input path or a generation-0 backup cannot be found."""

class IOFailure(ArchiveToolError):
    """Raised when a filesystem operation (rename, delete, copy, archive) fails."""
