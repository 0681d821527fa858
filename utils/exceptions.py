class ReceiptImportError(Exception):
    """Base class for every fatal error raised while importing a receipts export."""


class InvalidRlpFieldError(ValueError):
    """A scalar cannot be interpreted as the requested field type."""
    pass
