from groupmeta.offsets.errors import (
    AssignmentDecodeFailed,
    DecodeError,
    InvalidAssignmentVersion,
    InvalidKey,
    MalformedCount,
    MalformedLength,
    MissingValueVersion,
    TruncatedInput,
    UnsupportedVersion,
)
from groupmeta.offsets.group_metadata import (
    decode_group_metadata,
    decode_group_metadata_message,
    decode_member,
)
from groupmeta.offsets.offset_commit import decode_offset_commit_message
from groupmeta.offsets.ownership import (
    CollectingOwnershipObserver,
    LoggingOwnershipObserver,
    OwnershipObserver,
)
from groupmeta.offsets.records import decode_consumer_offsets_record
from groupmeta.offsets.types import (
    GroupMember,
    GroupMetadata,
    GroupMetadataHeader,
    GroupTombstone,
    OffsetCommit,
    OffsetCommitKey,
    OffsetCommitTombstone,
    PartitionOwnership,
)

__all__ = [
    "AssignmentDecodeFailed",
    "CollectingOwnershipObserver",
    "DecodeError",
    "GroupMember",
    "GroupMetadata",
    "GroupMetadataHeader",
    "GroupTombstone",
    "InvalidAssignmentVersion",
    "InvalidKey",
    "LoggingOwnershipObserver",
    "MalformedCount",
    "MalformedLength",
    "MissingValueVersion",
    "OffsetCommit",
    "OffsetCommitKey",
    "OffsetCommitTombstone",
    "OwnershipObserver",
    "PartitionOwnership",
    "TruncatedInput",
    "UnsupportedVersion",
    "decode_consumer_offsets_record",
    "decode_group_metadata",
    "decode_group_metadata_message",
    "decode_member",
    "decode_offset_commit_message",
]
