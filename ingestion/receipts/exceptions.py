from typing import Tuple

from utils.exceptions import ReceiptImportError


class ReceiptDecodeError(ReceiptImportError):
    """The RLP tree is well formed but does not hold a valid receipt batch."""


class MalformedReceiptEntry(ReceiptDecodeError):
    """A position that is neither a receipt, an empty placeholder nor a nested list."""

    def __init__(self, path: Tuple[int, ...], reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed receipt entry at path {list(path)}: {reason}")


class EmptyReceiptBatch(ReceiptDecodeError):
    """Raised when the caller requires receipts but the export holds none."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No receipts decoded from {path}")


class InvalidReceiptShapeError(ValueError):
    """
    Direct decode of a single receipt failed.

    This is control flow, not a fatal error: the flattener uses it to decide
    whether a list should be treated as a container of further receipts.
    """

    def __init__(self, reason: str, field_index: int | None = None):
        self.reason = reason
        self.field_index = field_index
        if field_index is None:
            super().__init__(reason)
        else:
            super().__init__(f"field {field_index}: {reason}")
