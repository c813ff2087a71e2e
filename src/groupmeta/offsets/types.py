from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Union

from kio.schema.types import GroupId, TopicName
from kio.static.primitive import i16, i32, i64

Assignment = Mapping[TopicName, tuple[i32, ...]]


@dataclass(frozen=True, slots=True)
class GroupMetadataHeader:
    protocol_type: str
    generation: i32
    protocol: str
    leader: str


@dataclass(frozen=True, slots=True)
class GroupMember:
    member_id: str
    client_id: str
    client_host: str
    session_timeout: i32
    # only present in value version 1
    rebalance_timeout: i32 | None = None
    assignment: Assignment = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class GroupMetadata:
    group_id: GroupId
    version: i16
    header: GroupMetadataHeader
    members: tuple[GroupMember, ...]


@dataclass(frozen=True, slots=True)
class GroupTombstone:
    group_id: GroupId


@dataclass(frozen=True, slots=True)
class PartitionOwnership:
    group_id: GroupId
    topic: TopicName
    partition: i32
    client_host: str
    client_id: str


@dataclass(frozen=True, slots=True)
class OffsetCommitKey:
    group_id: GroupId
    topic: TopicName
    partition: i32


@dataclass(frozen=True, slots=True)
class OffsetCommit:
    key: OffsetCommitKey
    version: i16
    offset: i64
    metadata: str
    commit_timestamp: i64
    leader_epoch: i32 | None = None
    expire_timestamp: i64 | None = None


@dataclass(frozen=True, slots=True)
class OffsetCommitTombstone:
    key: OffsetCommitKey


ConsumerOffsetsRecord = Union[
    GroupMetadata, GroupTombstone, OffsetCommit, OffsetCommitTombstone
]
