import pathlib
from typing import List, Optional, Union

from ingestion.receipts.exceptions import EmptyReceiptBatch
from ingestion.receipts.models.receipt import LegacyReceipt
from ingestion.receipts.service.receipt_flattener_service import (
    DEFAULT_MAX_NESTING_DEPTH,
    ReceiptFlattenerService,
)
from ingestion.rlp.exceptions import TruncatedInput
from ingestion.rlp.items import RlpList
from ingestion.rlp.reader import DEFAULT_MAX_DEPTH, RlpReader
from utils.logger_utils import get_logger

logger = get_logger("Receipt File Service")

# Byte 0 of an export is a format/version marker, not part of the RLP payload
FORMAT_MARKER_LENGTH = 1


class LegacyReceiptFileService(object):
    def __init__(
        self,
        rlp_reader: Optional[RlpReader] = None,
        flattener: Optional[ReceiptFlattenerService] = None,
        require_receipts: bool = False,
    ):
        self.rlp_reader = rlp_reader if rlp_reader is not None else RlpReader()
        self.flattener = flattener if flattener is not None else ReceiptFlattenerService()
        self.require_receipts = require_receipts

    def decode_receipts_from_path(self, path: Union[str, pathlib.Path]) -> List[LegacyReceipt]:
        """
        Decodes every receipt in an export file, in document order.

        OSError from reading the file propagates unchanged. Any decode error
        aborts the whole file; no partial result is returned.
        """
        data = pathlib.Path(path).read_bytes()
        receipts = self.decode_receipts_from_bytes(data)

        if not receipts and self.require_receipts:
            raise EmptyReceiptBatch(str(path))

        return receipts

    def decode_receipts_from_bytes(self, data: bytes) -> List[LegacyReceipt]:
        if len(data) < FORMAT_MARKER_LENGTH:
            raise TruncatedInput(0, FORMAT_MARKER_LENGTH, len(data))

        logger.debug(f"Export format marker: 0x{data[0]:02x}")
        payload = memoryview(data)[FORMAT_MARKER_LENGTH:]
        if not payload:
            logger.warning("rlp data is empty!")
            return []

        root, consumed = self.rlp_reader.read(payload)
        if consumed < len(payload):
            logger.warning(f"Ignoring {len(payload) - consumed} trailing byte(s) after the rlp root item")

        if not isinstance(root, RlpList):
            if root.is_empty:
                logger.warning("rlp data is null!")
            else:
                logger.warning("rlp root item is not a list, no receipts decoded")
            return []

        if root.is_empty:
            logger.warning("rlp data is an empty list!")
            return []

        logger.debug("decoding rlp data as list")
        return self.flattener.flatten(root)


def decode_receipts_from_path(
    path: Union[str, pathlib.Path],
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH,
    rlp_max_depth: int = DEFAULT_MAX_DEPTH,
    require_receipts: bool = False,
) -> List[LegacyReceipt]:
    """Decodes receipts from an RLP encoded receipts export file."""
    service = LegacyReceiptFileService(
        rlp_reader=RlpReader(max_depth=rlp_max_depth),
        flattener=ReceiptFlattenerService(max_nesting_depth=max_nesting_depth),
        require_receipts=require_receipts,
    )
    return service.decode_receipts_from_path(path)
