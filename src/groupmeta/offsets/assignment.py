from __future__ import annotations

from kio.schema.types import TopicName
from kio.static.primitive import i32

from groupmeta.offsets.errors import MalformedCount
from groupmeta.offsets.reader import Cursor
from groupmeta.offsets.types import Assignment

# smallest encodings: empty topic name + partition count, one partition id
_MIN_TOPIC_SIZE = 2 + 4
_PARTITION_SIZE = 4


def _check_count(count: int, cursor: Cursor, item_size: int, field: str) -> None:
    if count < 0:
        raise MalformedCount(field, count)
    if count * item_size > cursor.remaining:
        raise MalformedCount(
            field, count, reason=f"count exceeds the {cursor.remaining} remaining bytes"
        )


def decode_assignment(cursor: Cursor, field: str = "assignment") -> tuple[Assignment, Cursor]:
    """Decode the body of a consumer protocol assignment.

    ``cursor`` is positioned just after the assignment's own version tag. The
    body is a list of topics, each with its partition ids, followed by an
    opaque user data region that is skipped.
    """
    topic_count, cursor = cursor.read_int32(f"{field}.topic_count")
    _check_count(
        topic_count,
        cursor,
        _MIN_TOPIC_SIZE,
        f"{field}.topic_count",
    )

    topics: dict[TopicName, tuple[i32, ...]] = {}
    for i in range(topic_count):
        prefix = f"{field}.topics[{i}]"
        name, cursor = cursor.read_string(f"{prefix}.name")

        partition_count, cursor = cursor.read_int32(f"{prefix}.partition_count")
        _check_count(partition_count, cursor, _PARTITION_SIZE, f"{prefix}.partition_count")

        partitions: list[i32] = []
        for j in range(partition_count):
            partition, cursor = cursor.read_int32(f"{prefix}.partitions[{j}]")
            partitions.append(i32(partition))

        topic = TopicName(name)
        # a repeated topic replaces the earlier entry
        topics[topic] = tuple(partitions)

    user_data_length, cursor = cursor.read_int32(f"{field}.user_data")
    cursor = cursor.skip(user_data_length, f"{field}.user_data")

    return topics, cursor
