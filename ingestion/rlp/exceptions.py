from utils.exceptions import ReceiptImportError


class RlpDecodingError(ReceiptImportError):
    """The byte buffer is not a well formed RLP encoding."""


class TruncatedInput(RlpDecodingError):
    """A prefix declares more bytes than remain in the enclosing buffer."""

    def __init__(self, offset: int, needed: int, available: int):
        self.offset = offset
        self.needed = needed
        self.available = available
        super().__init__(
            f"Truncated input at offset {offset}: need {needed} byte(s), {available} available"
        )


class InvalidLengthEncoding(RlpDecodingError):
    """A long-form length field is truncated or encodes an implausible length."""

    def __init__(self, offset: int, reason: str):
        self.offset = offset
        self.reason = reason
        super().__init__(f"Invalid length encoding at offset {offset}: {reason}")


class DecodeDepthExceeded(RlpDecodingError):
    """List nesting went past the configured bound."""

    def __init__(self, depth: int, limit: int, offset: int | None = None, path: tuple | None = None):
        self.depth = depth
        self.limit = limit
        self.offset = offset
        self.path = path
        location = ""
        if offset is not None:
            location = f" at offset {offset}"
        elif path is not None:
            location = f" at path {list(path)}"
        super().__init__(f"Nesting depth {depth} exceeds limit {limit}{location}")
