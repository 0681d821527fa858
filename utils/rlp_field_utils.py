from eth_utils import big_endian_to_int

from constants.rlp_constants import HASH_LENGTH
from ingestion.rlp.items import RlpItem, RlpScalar
from utils.exceptions import InvalidRlpFieldError


def _scalar_data(item: RlpItem) -> bytes:
    if not isinstance(item, RlpScalar):
        raise InvalidRlpFieldError("expected a scalar, got a list")
    return item.data


def rlp_to_uint(item: RlpItem, bits: int) -> int:
    """
    Decodes a big-endian unsigned integer of at most ``bits`` bits.
    An empty scalar is zero. Leading zero bytes are rejected as non-canonical.
    """
    data = _scalar_data(item)
    if not data:
        return 0
    if data[0] == 0:
        raise InvalidRlpFieldError("integer has a leading zero byte")
    if len(data) > bits // 8:
        raise InvalidRlpFieldError(f"integer of {len(data)} byte(s) does not fit in {bits} bits")
    return big_endian_to_int(data)


def rlp_to_bytes(item: RlpItem) -> bytes:
    return _scalar_data(item)


def rlp_to_hash32(item: RlpItem) -> bytes:
    data = _scalar_data(item)
    if len(data) != HASH_LENGTH:
        raise InvalidRlpFieldError(f"hash must be {HASH_LENGTH} bytes, got {len(data)}")
    return data


def rlp_to_text(item: RlpItem) -> str:
    data = _scalar_data(item)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidRlpFieldError(f"string is not valid utf-8: {e}") from e
