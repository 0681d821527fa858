import pytest

from ingestion.receipts.exceptions import MalformedReceiptEntry
from ingestion.receipts.service.receipt_flattener_service import ReceiptFlattenerService
from ingestion.rlp.exceptions import DecodeDepthExceeded
from ingestion.rlp.reader import RlpReader, decode_rlp_item


@pytest.fixture
def flattener():
    return ReceiptFlattenerService()


def _root(rlp, value):
    item, _ = decode_rlp_item(rlp.encode(value))
    return item


def _receipts(rlp, count):
    return [rlp.fields(transaction_index=i, cumulative_gas_used=21000 * (i + 1)) for i in range(count)]


def test_flat_list_preserves_order(rlp, flattener):
    receipts = flattener.flatten(_root(rlp, _receipts(rlp, 5)))
    assert [r.transaction_index for r in receipts] == [0, 1, 2, 3, 4]
    assert [r.cumulative_gas_used for r in receipts] == [21000, 42000, 63000, 84000, 105000]


def test_empty_root(rlp, flattener):
    assert flattener.flatten(_root(rlp, [])) == []


def test_placeholders_are_skipped(rlp, flattener):
    r0, r1, r2 = _receipts(rlp, 3)
    without = flattener.flatten(_root(rlp, [r0, r1, r2]))
    with_placeholders = flattener.flatten(_root(rlp, [b"", r0, b"", r1, [b"", r2], b""]))
    assert with_placeholders == without


def test_nested_batches_are_flattened_depth_first(rlp, flattener):
    r0, r1, r2, r3 = _receipts(rlp, 4)
    receipts = flattener.flatten(_root(rlp, [[r0, r1], r2, [[r3]]]))
    assert [r.transaction_index for r in receipts] == [0, 1, 2, 3]


def test_empty_containers_contribute_nothing(rlp, flattener):
    (r0,) = _receipts(rlp, 1)
    receipts = flattener.flatten(_root(rlp, [[], [[]], r0, []]))
    assert len(receipts) == 1


@pytest.mark.parametrize("wraps", [0, 1, 2, 7, 8])
def test_receipt_wrapped_up_to_the_bound(rlp, wraps):
    flattener = ReceiptFlattenerService(max_nesting_depth=8)
    wrapped = rlp.wrap(rlp.encode(rlp.fields()), wraps)
    root, _ = decode_rlp_item(rlp.wrap(wrapped, 1))
    receipts = flattener.flatten(root)
    assert len(receipts) == 1
    assert receipts[0].status == 1


def test_receipt_wrapped_past_the_bound(rlp):
    flattener = ReceiptFlattenerService(max_nesting_depth=8)
    wrapped = rlp.wrap(rlp.encode(rlp.fields()), 9)
    root, _ = decode_rlp_item(rlp.wrap(wrapped, 1))
    with pytest.raises(DecodeDepthExceeded) as exc_info:
        flattener.flatten(root)
    assert exc_info.value.limit == 8
    assert exc_info.value.path == (0,) * 9


def test_deep_wrapping_within_default_bound(rlp, flattener):
    wrapped = rlp.wrap(rlp.encode(rlp.fields()), 200)
    root, _ = RlpReader(max_depth=1024).read(rlp.wrap(wrapped, 1))
    assert len(flattener.flatten(root)) == 1


def test_non_empty_scalar_is_malformed(rlp, flattener):
    r0, r1 = _receipts(rlp, 2)
    with pytest.raises(MalformedReceiptEntry) as exc_info:
        flattener.flatten(_root(rlp, [r0, b"junk", r1]))
    assert exc_info.value.path == (1,)


def test_malformed_entry_inside_a_batch_reports_its_path(rlp, flattener):
    r0, r1 = _receipts(rlp, 2)
    with pytest.raises(MalformedReceiptEntry) as exc_info:
        flattener.flatten(_root(rlp, [r0, [r1, b"\x2a"]]))
    assert exc_info.value.path == (1, 1)


def test_receipt_with_bad_field_is_rejected(rlp, flattener):
    # A 31-byte tx hash fails direct decode, so the list is walked as a
    # container: the empty type and post_state fields are placeholders and
    # the status field is the first non-empty scalar
    bad = rlp.fields(tx_hash=b"\x01" * 31)
    with pytest.raises(MalformedReceiptEntry) as exc_info:
        flattener.flatten(_root(rlp, [bad]))
    assert exc_info.value.path == (0, 2)


def test_flatten_is_deterministic(rlp, flattener):
    r0, r1, r2 = _receipts(rlp, 3)
    root = _root(rlp, [r0, [b"", r1], [[r2]]])
    assert flattener.flatten(root) == flattener.flatten(root)


def test_invalid_bound():
    with pytest.raises(ValueError):
        ReceiptFlattenerService(max_nesting_depth=0)
