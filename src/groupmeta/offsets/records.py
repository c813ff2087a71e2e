from __future__ import annotations

import structlog

from groupmeta.offsets.errors import InvalidKey, TruncatedInput, UnsupportedVersion
from groupmeta.offsets.group_metadata import decode_group_id, decode_group_metadata_message
from groupmeta.offsets.offset_commit import (
    decode_offset_commit_key,
    decode_offset_commit_message,
)
from groupmeta.offsets.ownership import OwnershipObserver
from groupmeta.offsets.reader import Cursor
from groupmeta.offsets.types import (
    ConsumerOffsetsRecord,
    GroupTombstone,
    OffsetCommitTombstone,
)

log = structlog.get_logger()

INTERNAL_OFFSETS_TOPIC = "__consumer_offsets"

OFFSET_COMMIT_KEY_VERSIONS = frozenset({0, 1})
GROUP_METADATA_KEY_VERSION = 2


def read_key_version(key: bytes | bytearray | memoryview | None) -> tuple[int, bytes]:
    if key is None:
        raise InvalidKey("key.version")
    try:
        version, cursor = Cursor.over(key).read_int16("key.version")
    except TruncatedInput as e:
        raise InvalidKey("key.version", e) from e
    return version, cursor.data[cursor.position:]


def decode_consumer_offsets_record(
    key: bytes | bytearray | memoryview | None,
    value: bytes | bytearray | memoryview | None,
    observer: OwnershipObserver | None = None,
) -> ConsumerOffsetsRecord:
    """Decode one record of the ``__consumer_offsets`` topic.

    The key's version decides what the record holds: versions 0 and 1 are
    committed offsets, version 2 is group metadata. A record without a value
    is a tombstone for whatever its key names.
    """
    try:
        key_version, key_body = read_key_version(key)
    except InvalidKey as e:
        log.warning("failed to decode", reason=e.field, error=str(e))
        raise

    if key_version in OFFSET_COMMIT_KEY_VERSIONS:
        if value is None:
            return OffsetCommitTombstone(key=decode_offset_commit_key(key_body))
        return decode_offset_commit_message(key_body, value)

    if key_version == GROUP_METADATA_KEY_VERSION:
        if value is None:
            return GroupTombstone(group_id=decode_group_id(key_body))
        return decode_group_metadata_message(key_body, value, observer)

    log.warning("failed to decode", reason="key version", version=key_version)
    raise UnsupportedVersion("key.version", key_version)
