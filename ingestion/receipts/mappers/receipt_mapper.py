# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Modified By: Legacy Receipts Import contributors, 19/10/2026
# Change Description: Decodes positional RLP receipt fields instead of JSON-RPC dicts.

from typing import Any, Callable, Dict, List, Tuple

from pydantic import ValidationError

from constants.rlp_constants import (
    RECEIPT_FIELD_COUNT,
    UINT8_BITS,
    UINT64_BITS,
    UINT256_BITS,
)
from ingestion.receipts.exceptions import InvalidReceiptShapeError
from ingestion.receipts.models.receipt import LegacyReceipt
from ingestion.rlp.items import RlpItem, RlpList
from utils.exceptions import InvalidRlpFieldError
from utils.rlp_field_utils import rlp_to_bytes, rlp_to_hash32, rlp_to_text, rlp_to_uint


def _raw_encoding(item: RlpItem) -> bytes:
    return item.raw


def _uint(bits: int) -> Callable[[RlpItem], int]:
    return lambda item: rlp_to_uint(item, bits)


# Positional layout of a receipt list: (model field, decoder)
RECEIPT_FIELD_DECODERS: List[Tuple[str, Callable[[RlpItem], Any]]] = [
    ("type", _uint(UINT8_BITS)),
    ("post_state", rlp_to_bytes),
    ("status", _uint(UINT64_BITS)),
    ("cumulative_gas_used", _uint(UINT64_BITS)),
    ("bloom", rlp_to_bytes),
    ("logs", _raw_encoding),
    ("tx_hash", rlp_to_hash32),
    ("contract_address", rlp_to_text),
    ("gas_used", _uint(UINT64_BITS)),
    ("block_hash", rlp_to_hash32),
    ("block_number", _uint(UINT256_BITS)),
    ("transaction_index", _uint(UINT64_BITS)),
    ("l1_gas_price", _uint(UINT256_BITS)),
    ("l1_gas_used", _uint(UINT256_BITS)),
    ("l1_fee", _uint(UINT256_BITS)),
    ("l1_fee_scalar", rlp_to_text),
]


class LegacyReceiptMapper(object):
    def rlp_item_to_receipt(self, item: RlpItem) -> LegacyReceipt:
        """
        Decodes one receipt directly from a list of 16 positional fields.

        Raises:
            InvalidReceiptShapeError: The item is not a 16-field list or a field does not decode.
        """
        if not isinstance(item, RlpList):
            raise InvalidReceiptShapeError("expected a list of receipt fields, got a scalar")
        if len(item.items) != RECEIPT_FIELD_COUNT:
            raise InvalidReceiptShapeError(
                f"expected {RECEIPT_FIELD_COUNT} receipt fields, got {len(item.items)}"
            )

        fields: Dict[str, Any] = {}
        for index, ((name, decode), field_item) in enumerate(zip(RECEIPT_FIELD_DECODERS, item.items)):
            try:
                fields[name] = decode(field_item)
            except InvalidRlpFieldError as e:
                raise InvalidReceiptShapeError(f"{name}: {e}", field_index=index) from e

        try:
            return LegacyReceipt(**fields)
        except ValidationError as e:
            raise InvalidReceiptShapeError(f"receipt does not validate: {e}") from e

    @staticmethod
    def receipt_to_dict(receipt: LegacyReceipt) -> Dict[str, Any]:
        return receipt.model_dump(mode="json", by_alias=True)
