from typing import Any, Dict, List, Union

import pytest
from hexbytes import HexBytes
from rlp import encode as rlp_encode

# Nested bytes/lists, the shape the test encoder accepts
Encodable = Union[bytes, List["Encodable"]]

TX_HASH = HexBytes("0x" + "ab" * 32)
BLOCK_HASH = HexBytes("0x" + "cd" * 32)
BLOOM = bytes(256)


def uint(value: int) -> bytes:
    """Minimal big-endian encoding, zero is the empty string."""
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def encode_rlp(item: Encodable) -> bytes:
    return rlp_encode(item)


def wrap_in_lists(encoded: bytes, times: int) -> bytes:
    """
    Wraps an encoding in ``times`` singleton lists without recursion, so nesting
    can go deeper than the encoder's recursion allows.
    """
    for _ in range(times):
        length = len(encoded)
        if length <= 55:
            prefix = bytes([0xC0 + length])
        else:
            length_bytes = uint(length)
            prefix = bytes([0xF7 + len(length_bytes)]) + length_bytes
        encoded = prefix + encoded
    return encoded


def receipt_values(**overrides: Any) -> Dict[str, Any]:
    values = dict(
        type=0,
        post_state=b"",
        status=1,
        cumulative_gas_used=21000,
        bloom=BLOOM,
        logs=[],
        tx_hash=bytes(TX_HASH),
        contract_address="",
        gas_used=21000,
        block_hash=bytes(BLOCK_HASH),
        block_number=1,
        transaction_index=0,
        l1_gas_price=1_000_000_000,
        l1_gas_used=2000,
        l1_fee=2_000_000_000_000,
        l1_fee_scalar="1.5",
    )
    values.update(overrides)
    return values


def receipt_fields(**overrides: Any) -> List[Encodable]:
    """The 16 positional RLP fields of a receipt."""
    v = receipt_values(**overrides)
    return [
        uint(v["type"]),
        v["post_state"],
        uint(v["status"]),
        uint(v["cumulative_gas_used"]),
        v["bloom"],
        v["logs"],
        v["tx_hash"],
        v["contract_address"].encode("utf-8"),
        uint(v["gas_used"]),
        v["block_hash"],
        uint(v["block_number"]),
        uint(v["transaction_index"]),
        uint(v["l1_gas_price"]),
        uint(v["l1_gas_used"]),
        uint(v["l1_fee"]),
        v["l1_fee_scalar"].encode("utf-8"),
    ]


@pytest.fixture
def rlp():
    """Access to the fixture builders from tests."""

    class _Builders(object):
        encode = staticmethod(encode_rlp)
        wrap = staticmethod(wrap_in_lists)
        uint = staticmethod(uint)
        values = staticmethod(receipt_values)
        fields = staticmethod(receipt_fields)

    return _Builders


@pytest.fixture
def write_export(tmp_path):
    """Writes an export file: one format marker byte followed by the payload."""

    def _write(payload: bytes, name: str = "receipts.rlp", marker: bytes = b"\x01"):
        path = tmp_path / name
        path.write_bytes(marker + payload)
        return path

    return _write
