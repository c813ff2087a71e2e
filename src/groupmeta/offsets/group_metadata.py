from __future__ import annotations

import structlog
from kio.schema.types import GroupId
from kio.static.primitive import i16, i32

from groupmeta.offsets.assignment import decode_assignment
from groupmeta.offsets.errors import (
    AssignmentDecodeFailed,
    DecodeError,
    InvalidAssignmentVersion,
    InvalidKey,
    MalformedCount,
    MissingValueVersion,
    TruncatedInput,
    UnsupportedVersion,
)
from groupmeta.offsets.ownership import OwnershipObserver, ownerships
from groupmeta.offsets.reader import Cursor
from groupmeta.offsets.types import GroupMember, GroupMetadata, GroupMetadataHeader

log = structlog.get_logger()

SUPPORTED_VALUE_VERSIONS = frozenset({0, 1})


def decode_member(version: int, cursor: Cursor, field: str = "member") -> tuple[GroupMember, Cursor]:
    member_id, cursor = cursor.read_string(f"{field}.member_id")
    client_id, cursor = cursor.read_string(f"{field}.client_id")
    client_host, cursor = cursor.read_string(f"{field}.client_host")

    rebalance_timeout = None
    if version == 1:
        rebalance_timeout, cursor = cursor.read_int32(f"{field}.rebalance_timeout")
        rebalance_timeout = i32(rebalance_timeout)
    session_timeout, cursor = cursor.read_int32(f"{field}.session_timeout")

    # subscription metadata is carried but not interpreted
    _, cursor = cursor.read_sized_region(f"{field}.subscription_bytes")

    region, cursor = cursor.read_sized_region(f"{field}.assignment_bytes")
    assignment = {}
    if region.remaining > 0:
        assignment_version, region = region.read_int16(f"{field}.consumer_protocol_version")
        if assignment_version < 0:
            raise InvalidAssignmentVersion(f"{field}.consumer_protocol_version", assignment_version)
        try:
            assignment, _ = decode_assignment(region, f"{field}.assignment")
        except DecodeError as e:
            raise AssignmentDecodeFailed(f"{field}.assignment", e) from e

    member = GroupMember(
        member_id=member_id,
        client_id=client_id,
        client_host=client_host,
        session_timeout=i32(session_timeout),
        rebalance_timeout=rebalance_timeout,
        assignment=assignment,
    )
    return member, cursor


def decode_group_metadata(
    version: int,
    group_id: str,
    cursor: Cursor,
    observer: OwnershipObserver | None = None,
) -> GroupMetadata:
    """Decode a group metadata value positioned just after its version tag.

    Ownership events are reported to ``observer`` only once every member has
    been decoded, so a message that fails part way through reports nothing.
    """
    if version not in SUPPORTED_VALUE_VERSIONS:
        raise UnsupportedVersion("version", version)

    protocol_type, cursor = cursor.read_string("protocol_type")
    generation, cursor = cursor.read_int32("generation")
    protocol, cursor = cursor.read_string("protocol")
    leader, cursor = cursor.read_string("leader")
    header = GroupMetadataHeader(
        protocol_type=protocol_type,
        generation=i32(generation),
        protocol=protocol,
        leader=leader,
    )

    member_count, cursor = cursor.read_int32("member_count")
    if member_count < 0:
        raise MalformedCount("member_count", member_count)

    members = []
    for i in range(member_count):
        member, cursor = decode_member(version, cursor, f"members[{i}]")
        members.append(member)

    metadata = GroupMetadata(
        group_id=GroupId(group_id),
        version=i16(version),
        header=header,
        members=tuple(members),
    )

    if observer is not None:
        for ownership in ownerships(metadata):
            observer.report_ownership(ownership)

    return metadata


def decode_group_id(key: bytes | bytearray | memoryview | None) -> GroupId:
    """Decode a group metadata key (without its key version) to a group id."""
    if key is None:
        raise InvalidKey("key.group")
    try:
        group, _ = Cursor.over(key).read_string("key.group")
    except DecodeError as e:
        raise InvalidKey("key.group", e) from e
    return GroupId(group)


def decode_group_metadata_message(
    key: bytes | bytearray | memoryview | None,
    value: bytes | bytearray | memoryview | None,
    observer: OwnershipObserver | None = None,
) -> GroupMetadata:
    try:
        group = decode_group_id(key)
    except InvalidKey as e:
        log.warning("failed to decode", message_type="metadata", reason=e.field, error=str(e))
        raise

    metadata_log = log.bind(message_type="metadata", group=group)

    if value is None:
        metadata_log.warning("failed to decode", reason="no value version")
        raise MissingValueVersion("version", needed=2, available=0)
    cursor = Cursor.over(value)
    try:
        version, cursor = cursor.read_int16("version")
    except TruncatedInput as e:
        metadata_log.warning("failed to decode", reason="no value version")
        raise MissingValueVersion("version", needed=e.needed, available=e.available) from e

    if version not in SUPPORTED_VALUE_VERSIONS:
        metadata_log.warning("failed to decode", reason="value version", version=version)
        raise UnsupportedVersion("version", version)

    try:
        return decode_group_metadata(version, group, cursor, observer)
    except DecodeError as e:
        metadata_log.warning("failed to decode", reason=e.field, error=str(e))
        raise
