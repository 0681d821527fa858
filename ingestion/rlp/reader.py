"""
Recursive Length Prefix (RLP) reader.

Parses a byte buffer into an ``RlpItem`` tree. Parsing is purely length
driven: every header declares the size of its payload before the payload is
consumed, so the reader never backtracks. Nested lists are handled with an
explicit stack of open lists rather than recursion, which keeps deeply
nested input off the Python call stack.
"""

import sys
from typing import List, Tuple, Union

from constants.rlp_constants import (
    LONG_LIST_BASE,
    LONG_STRING_BASE,
    SHORT_LIST_MAX_LEN,
    SHORT_LIST_PREFIX,
    SHORT_STRING_MAX_LEN,
    SHORT_STRING_PREFIX,
    SINGLE_BYTE_MAX,
)
from ingestion.rlp.exceptions import DecodeDepthExceeded, InvalidLengthEncoding, TruncatedInput
from ingestion.rlp.items import RlpItem, RlpList, RlpScalar

DEFAULT_MAX_DEPTH = 1024

BytesLike = Union[bytes, bytearray, memoryview]


class _Header(object):
    __slots__ = ("offset", "is_list", "payload_start", "payload_end")

    def __init__(self, offset: int, is_list: bool, payload_start: int, payload_end: int):
        self.offset = offset
        self.is_list = is_list
        self.payload_start = payload_start
        self.payload_end = payload_end


class _OpenList(object):
    __slots__ = ("offset", "end", "children")

    def __init__(self, offset: int, end: int):
        self.offset = offset
        self.end = end
        self.children: List[RlpItem] = []


class RlpReader(object):
    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        if max_depth <= 0:
            raise ValueError(f"max_depth must be greater than 0, got {max_depth}")
        self.max_depth = max_depth

    def read(self, data: BytesLike, offset: int = 0) -> Tuple[RlpItem, int]:
        """
        Reads exactly one item starting at ``offset``.

        Args:
            data: The encoded buffer. Items keep views into it, so it must not be mutated.
            offset: Where the item's prefix byte is.

        Returns:
            The root item and the number of bytes it occupied.

        Raises:
            TruncatedInput: A declared length runs past the end of the buffer or the enclosing list.
            InvalidLengthEncoding: A long-form length field is truncated or non-canonical.
            DecodeDepthExceeded: More than ``max_depth`` lists are open at once.
        """
        view = memoryview(data)
        buffer_end = len(view)
        open_lists: List[_OpenList] = []
        position = offset

        while True:
            limit = open_lists[-1].end if open_lists else buffer_end
            header = self._read_header(view, position, limit)

            if header.is_list and len(open_lists) >= self.max_depth:
                raise DecodeDepthExceeded(len(open_lists) + 1, self.max_depth, offset=header.offset)

            if header.is_list and header.payload_start < header.payload_end:
                open_lists.append(_OpenList(header.offset, header.payload_end))
                position = header.payload_start
                continue

            if header.is_list:
                item = RlpList.from_encoding(view[header.offset:header.payload_end])
            else:
                item = RlpScalar.from_encoding(
                    view[header.offset:header.payload_end],
                    data=bytes(view[header.payload_start:header.payload_end]),
                )
            position = header.payload_end

            # Attach the finished item and close every list whose payload is now exhausted
            while open_lists:
                parent = open_lists[-1]
                parent.children.append(item)
                if position < parent.end:
                    break
                open_lists.pop()
                item = RlpList.from_encoding(view[parent.offset:parent.end], items=tuple(parent.children))
            else:
                return item, position - offset

    @staticmethod
    def _read_header(view: memoryview, offset: int, limit: int) -> _Header:
        if offset >= limit:
            raise TruncatedInput(offset, 1, 0)

        prefix = view[offset]

        # Single byte: 0x00-0x7f
        if prefix <= SINGLE_BYTE_MAX:
            return _Header(offset, False, offset, offset + 1)

        # Short string: 0x80-0xb7
        if prefix <= LONG_STRING_BASE:
            return _check_payload(offset, False, offset + 1, prefix - SHORT_STRING_PREFIX, limit)

        # Long string: 0xb8-0xbf
        if prefix < SHORT_LIST_PREFIX:
            length = _read_long_length(view, offset, prefix - LONG_STRING_BASE, SHORT_STRING_MAX_LEN, limit)
            return _check_payload(offset, False, offset + 1 + prefix - LONG_STRING_BASE, length, limit)

        # Short list: 0xc0-0xf7
        if prefix <= LONG_LIST_BASE:
            return _check_payload(offset, True, offset + 1, prefix - SHORT_LIST_PREFIX, limit)

        # Long list: 0xf8-0xff
        length = _read_long_length(view, offset, prefix - LONG_LIST_BASE, SHORT_LIST_MAX_LEN, limit)
        return _check_payload(offset, True, offset + 1 + prefix - LONG_LIST_BASE, length, limit)


def _read_long_length(view: memoryview, offset: int, length_of_length: int, short_max: int, limit: int) -> int:
    start = offset + 1
    end = start + length_of_length
    if end > limit:
        raise InvalidLengthEncoding(
            offset, f"length field needs {length_of_length} byte(s), {max(limit - start, 0)} available"
        )
    if view[start] == 0:
        raise InvalidLengthEncoding(offset, "leading zero in length field")

    length = int.from_bytes(view[start:end], "big")
    if length <= short_max:
        raise InvalidLengthEncoding(offset, f"long form used for length {length}")
    # No buffer can be larger than the biggest addressable sequence
    if length > sys.maxsize:
        raise InvalidLengthEncoding(offset, f"length {length} exceeds the largest addressable buffer")
    return length


def _check_payload(offset: int, is_list: bool, payload_start: int, length: int, limit: int) -> _Header:
    payload_end = payload_start + length
    if payload_end > limit:
        raise TruncatedInput(offset, payload_end - offset, limit - offset)
    return _Header(offset, is_list, payload_start, payload_end)


def decode_rlp_item(data: BytesLike, max_depth: int = DEFAULT_MAX_DEPTH) -> Tuple[RlpItem, int]:
    """Reads the item at the start of ``data``. See ``RlpReader.read``."""
    return RlpReader(max_depth=max_depth).read(data)
