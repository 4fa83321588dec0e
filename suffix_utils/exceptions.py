class InvalidInputError(ValueError):
    """Raised when a text or pattern can't be indexed."""
