class InvariantViolation(Exception):
    """Raised when a document would be persisted in an invalid state."""
