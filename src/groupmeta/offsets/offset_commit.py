from __future__ import annotations

import structlog
from kio.schema.types import GroupId, TopicName
from kio.static.primitive import i16, i32, i64

from groupmeta.offsets.errors import (
    DecodeError,
    InvalidKey,
    MissingValueVersion,
    TruncatedInput,
    UnsupportedVersion,
)
from groupmeta.offsets.reader import Cursor
from groupmeta.offsets.types import OffsetCommit, OffsetCommitKey

log = structlog.get_logger()

SUPPORTED_VALUE_VERSIONS = frozenset({0, 1, 2, 3})


def decode_offset_commit_key(key: bytes | bytearray | memoryview | None) -> OffsetCommitKey:
    """Decode an offset commit key (without its key version)."""
    if key is None:
        raise InvalidKey("key")
    cursor = Cursor.over(key)
    try:
        group, cursor = cursor.read_string("key.group")
        topic, cursor = cursor.read_string("key.topic")
        partition, cursor = cursor.read_int32("key.partition")
    except DecodeError as e:
        raise InvalidKey(e.field, e) from e
    return OffsetCommitKey(
        group_id=GroupId(group),
        topic=TopicName(topic),
        partition=i32(partition),
    )


def decode_offset_commit_value(key: OffsetCommitKey, version: int, cursor: Cursor) -> OffsetCommit:
    offset, cursor = cursor.read_int64("offset")

    leader_epoch = None
    if version >= 3:
        leader_epoch, cursor = cursor.read_int32("leader_epoch")
        leader_epoch = i32(leader_epoch)

    metadata, cursor = cursor.read_string("metadata")
    commit_timestamp, cursor = cursor.read_int64("commit_timestamp")

    expire_timestamp = None
    if version == 1:
        expire_timestamp, cursor = cursor.read_int64("expire_timestamp")
        expire_timestamp = i64(expire_timestamp)

    return OffsetCommit(
        key=key,
        version=i16(version),
        offset=i64(offset),
        metadata=metadata,
        commit_timestamp=i64(commit_timestamp),
        leader_epoch=leader_epoch,
        expire_timestamp=expire_timestamp,
    )


def decode_offset_commit_message(
    key: bytes | bytearray | memoryview | None,
    value: bytes | bytearray | memoryview | None,
) -> OffsetCommit:
    try:
        commit_key = decode_offset_commit_key(key)
    except InvalidKey as e:
        log.warning("failed to decode", message_type="offset", reason=e.field, error=str(e))
        raise

    offset_log = log.bind(
        message_type="offset",
        group=commit_key.group_id,
        topic=commit_key.topic,
        partition=commit_key.partition,
    )

    if value is None:
        offset_log.warning("failed to decode", reason="no value version")
        raise MissingValueVersion("version", needed=2, available=0)
    cursor = Cursor.over(value)
    try:
        version, cursor = cursor.read_int16("version")
    except TruncatedInput as e:
        offset_log.warning("failed to decode", reason="no value version")
        raise MissingValueVersion("version", needed=e.needed, available=e.available) from e

    if version not in SUPPORTED_VALUE_VERSIONS:
        offset_log.warning("failed to decode", reason="value version", version=version)
        raise UnsupportedVersion("version", version)

    try:
        return decode_offset_commit_value(commit_key, version, cursor)
    except DecodeError as e:
        offset_log.warning("failed to decode", reason=e.field, error=str(e))
        raise
