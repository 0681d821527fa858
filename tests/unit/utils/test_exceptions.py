from ingestion.receipts.exceptions import EmptyReceiptBatch, MalformedReceiptEntry
from ingestion.rlp.exceptions import DecodeDepthExceeded, InvalidLengthEncoding, TruncatedInput
from utils.exceptions import ReceiptImportError


def test_rlp_and_receipt_errors_share_one_base():
    errors = [
        TruncatedInput(0, 2, 1),
        InvalidLengthEncoding(0, "leading zero in length field"),
        DecodeDepthExceeded(3, 2, path=(0, 0)),
        MalformedReceiptEntry((1,), "expected a list"),
        EmptyReceiptBatch("receipts.rlp"),
    ]
    for error in errors:
        assert isinstance(error, ReceiptImportError)
