class DocumentError(Exception):
    """Raised when the resume document cannot be read or fails validation."""
