from typing import Iterator, List, Optional, Tuple

from ingestion.receipts.exceptions import InvalidReceiptShapeError, MalformedReceiptEntry
from ingestion.receipts.mappers.receipt_mapper import LegacyReceiptMapper
from ingestion.receipts.models.receipt import LegacyReceipt
from ingestion.rlp.exceptions import DecodeDepthExceeded
from ingestion.rlp.items import RlpItem, RlpList, RlpScalar

DEFAULT_MAX_NESTING_DEPTH = 256


class ReceiptFlattenerService(object):
    """
    Turns an RLP tree of receipts into a flat, ordered list.

    The export tool sometimes emits receipts one by one and sometimes groups
    them into lists, to a depth that is not uniform across a file. Each child
    is first decoded directly as a receipt; a list that fails to decode is
    treated as a container and walked in turn. Output order is depth-first,
    left to right.
    """

    def __init__(self, receipt_mapper: Optional[LegacyReceiptMapper] = None,
                 max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH):
        if max_nesting_depth <= 0:
            raise ValueError(f"max_nesting_depth must be greater than 0, got {max_nesting_depth}")
        self.receipt_mapper = receipt_mapper if receipt_mapper is not None else LegacyReceiptMapper()
        self.max_nesting_depth = max_nesting_depth

    def flatten(self, root: RlpList) -> List[LegacyReceipt]:
        """
        Collects every receipt below ``root``. The root itself is never decoded as a receipt.

        Raises:
            MalformedReceiptEntry: A non-empty scalar sits where a receipt or list was expected.
            DecodeDepthExceeded: Containers nest deeper than ``max_nesting_depth``.
        """
        receipts: List[LegacyReceipt] = []
        # One frame per list being walked: (child iterator, path of that list)
        frames: List[Tuple[Iterator[Tuple[int, RlpItem]], Tuple[int, ...]]] = [
            (enumerate(root.items), ())
        ]

        while frames:
            children, parent_path = frames[-1]
            next_child = next(children, None)
            if next_child is None:
                frames.pop()
                continue

            index, child = next_child
            path = parent_path + (index,)

            # Empty placeholder
            if isinstance(child, RlpScalar) and child.is_empty:
                continue

            try:
                receipts.append(self.receipt_mapper.rlp_item_to_receipt(child))
                continue
            except InvalidReceiptShapeError as e:
                if not isinstance(child, RlpList):
                    raise MalformedReceiptEntry(path, e.reason) from e

            # The container being entered sits at depth len(frames)
            if len(frames) > self.max_nesting_depth:
                raise DecodeDepthExceeded(len(frames), self.max_nesting_depth, path=path)
            frames.append((enumerate(child.items), path))

        return receipts
