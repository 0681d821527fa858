"""
Immutable RLP item tree.

An item is either a byte string (``RlpScalar``) or an ordered list of items
(``RlpList``). Both keep a zero-copy view of their own encoding so a caller can
recover the exact bytes a sub-tree was read from.
"""

from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, PrivateAttr


class _RlpItemBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    _raw: memoryview = PrivateAttr(default_factory=lambda: memoryview(b""))

    @classmethod
    def from_encoding(cls, raw: memoryview, **fields):
        """Builds an item that remembers the slice of the source buffer it was read from."""
        item = cls(**fields)
        item._raw = raw
        return item

    @property
    def raw(self) -> bytes:
        """The exact encoding (prefix and payload) this item was read from."""
        return bytes(self._raw)


class RlpScalar(_RlpItemBase):
    data: bytes = b""

    @property
    def is_empty(self) -> bool:
        return len(self.data) == 0


class RlpList(_RlpItemBase):
    items: Tuple["RlpItem", ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0


RlpItem = Union[RlpScalar, RlpList]

RlpList.model_rebuild()
