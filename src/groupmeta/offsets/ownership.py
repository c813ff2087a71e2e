from __future__ import annotations

from typing import Iterator, Protocol

import structlog

from groupmeta.offsets.types import GroupMetadata, PartitionOwnership

log = structlog.get_logger()


class OwnershipObserver(Protocol):
    def report_ownership(self, ownership: PartitionOwnership) -> None: ...


class LoggingOwnershipObserver:
    """Logs one line per owned partition."""

    def __init__(self, logger=None):
        self.log = logger if logger is not None else log

    def report_ownership(self, ownership: PartitionOwnership) -> None:
        self.log.info(
            "got group metadata",
            group=ownership.group_id,
            topic=ownership.topic,
            partition=ownership.partition,
            owner=ownership.client_host,
            client_id=ownership.client_id,
        )


class CollectingOwnershipObserver:
    def __init__(self):
        self.events: list[PartitionOwnership] = []

    def report_ownership(self, ownership: PartitionOwnership) -> None:
        self.events.append(ownership)


def ownerships(metadata: GroupMetadata) -> Iterator[PartitionOwnership]:
    for member in metadata.members:
        for topic, partitions in member.assignment.items():
            for partition in partitions:
                yield PartitionOwnership(
                    group_id=metadata.group_id,
                    topic=topic,
                    partition=partition,
                    client_host=member.client_host,
                    client_id=member.client_id,
                )
