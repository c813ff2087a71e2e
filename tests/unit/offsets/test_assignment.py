import pytest

from groupmeta.offsets.assignment import decode_assignment
from groupmeta.offsets.errors import MalformedCount, MalformedLength, TruncatedInput
from groupmeta.offsets.reader import Cursor
from tests.utils.encode import (
    encode_assignment,
    encode_int32,
    encode_string,
)


def _body(blob: bytes) -> Cursor:
    # drop the assignment version, which the member decoder consumes
    return Cursor.over(blob[2:])


def test_decode_assignment_preserves_order_and_duplicates():
    blob = encode_assignment([("orders", [3, 1, 1, 0]), ("payments", [7])])
    topics, cursor = decode_assignment(_body(blob))
    assert topics == {"orders": (3, 1, 1, 0), "payments": (7,)}
    assert list(topics) == ["orders", "payments"]
    assert cursor.remaining == 0


def test_decode_assignment_zero_topics():
    topics, cursor = decode_assignment(_body(encode_assignment({})))
    assert topics == {}
    assert cursor.remaining == 0


def test_decode_assignment_topic_without_partitions():
    topics, _ = decode_assignment(_body(encode_assignment({"idle": []})))
    assert topics == {"idle": ()}


def test_decode_assignment_repeated_topic_keeps_last_entry():
    blob = encode_assignment([("orders", [0]), ("payments", [1]), ("orders", [2])])
    topics, cursor = decode_assignment(_body(blob))
    assert topics == {"orders": (2,), "payments": (1,)}
    assert cursor.remaining == 0


def test_decode_assignment_skips_user_data():
    sentinel = encode_int32(0x0BADF00D)
    blob = encode_assignment({"orders": [0]}, user_data=b"\x01\x02\x03\x04\x05") + sentinel
    topics, cursor = decode_assignment(_body(blob))
    assert topics == {"orders": (0,)}
    value, _ = cursor.read_int32("sentinel")
    assert value == 0x0BADF00D


def test_decode_assignment_negative_topic_count():
    with pytest.raises(MalformedCount) as exc_info:
        decode_assignment(Cursor.over(encode_int32(-1)))
    assert exc_info.value.field == "assignment.topic_count"
    assert exc_info.value.count == -1


def test_decode_assignment_topic_count_larger_than_region():
    with pytest.raises(MalformedCount) as exc_info:
        decode_assignment(Cursor.over(encode_int32(1000) + encode_string("a")))
    assert exc_info.value.field == "assignment.topic_count"


def test_decode_assignment_negative_partition_count():
    region = encode_int32(1) + encode_string("orders") + encode_int32(-3)
    with pytest.raises(MalformedCount) as exc_info:
        decode_assignment(Cursor.over(region))
    assert exc_info.value.field == "assignment.topics[0].partition_count"


def test_decode_assignment_partition_count_larger_than_region():
    region = (
        encode_int32(1)
        + encode_string("orders")
        + encode_int32(2)
        + encode_int32(0)
        + b"\x00\x00"
    )
    with pytest.raises(MalformedCount) as exc_info:
        decode_assignment(Cursor.over(region))
    assert exc_info.value.field == "assignment.topics[0].partition_count"
    assert exc_info.value.count == 2


def test_decode_assignment_missing_user_data_length():
    region = encode_int32(1) + encode_string("orders") + encode_int32(1) + encode_int32(4)
    with pytest.raises(TruncatedInput) as exc_info:
        decode_assignment(Cursor.over(region), "members[2].assignment")
    assert exc_info.value.field == "members[2].assignment.user_data"


def test_decode_assignment_negative_user_data_length():
    region = encode_int32(0) + encode_int32(-5)
    with pytest.raises(MalformedLength) as exc_info:
        decode_assignment(Cursor.over(region))
    assert exc_info.value.field == "assignment.user_data"


def test_decode_assignment_bad_topic_name():
    region = encode_int32(1) + b"\x00\x09abc" + b"\x00" * 4
    with pytest.raises(TruncatedInput) as exc_info:
        decode_assignment(Cursor.over(region))
    assert exc_info.value.field == "assignment.topics[0].name"
