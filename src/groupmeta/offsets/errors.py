from __future__ import annotations


class DecodeError(ValueError):
    """Base class for every failure raised while decoding a
    ``__consumer_offsets`` record.

    ``field`` is the dotted path of the value that could not be read, for
    example ``members[0].session_timeout``.
    """

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class TruncatedInput(DecodeError):
    def __init__(self, field: str, *, needed: int, available: int):
        super().__init__(
            field, f"needed {needed} bytes but only {available} remain"
        )
        self.needed = needed
        self.available = available


class MissingValueVersion(TruncatedInput):
    pass


class MalformedLength(DecodeError):
    def __init__(self, field: str, length: int):
        super().__init__(field, f"invalid length {length}")
        self.length = length


class MalformedCount(DecodeError):
    def __init__(self, field: str, count: int, reason: str = "negative count"):
        super().__init__(field, f"{reason} ({count})")
        self.count = count


class InvalidAssignmentVersion(DecodeError):
    def __init__(self, field: str, version: int):
        super().__init__(field, f"invalid assignment version {version}")
        self.version = version


class UnsupportedVersion(DecodeError):
    def __init__(self, field: str, version: int):
        super().__init__(field, f"version {version} is not supported")
        self.version = version


class AssignmentDecodeFailed(DecodeError):
    def __init__(self, field: str, cause: DecodeError):
        super().__init__(field, f"assignment could not be decoded ({cause})")
        self.cause = cause


class InvalidKey(DecodeError):
    def __init__(self, field: str, cause: DecodeError | None = None):
        detail = str(cause) if cause is not None else "key is missing"
        super().__init__(field, f"invalid key ({detail})")
        self.cause = cause
