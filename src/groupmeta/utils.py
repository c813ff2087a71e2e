import dataclasses
from typing import Any


def bytes_from_hex(value: str) -> bytes:
    """Parse hex as printed by kcat/kafka-console-consumer, with or without a 0x prefix."""
    text = "".join(value.split())
    if text[:2].lower() == "0x":
        text = text[2:]
    return bytes.fromhex(text)


def record_to_dict(record: Any) -> dict[str, Any]:
    payload = dataclasses.asdict(record)
    payload["type"] = type(record).__name__
    return payload
