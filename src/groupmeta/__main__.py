import argparse
import json
import sys

from groupmeta.config import Config
from groupmeta.logger import configure_logging, log
from groupmeta.offsets import (
    DecodeError,
    LoggingOwnershipObserver,
    decode_consumer_offsets_record,
    decode_group_metadata_message,
)
from groupmeta.utils import bytes_from_hex, record_to_dict


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="groupmeta",
        description="Decode a record of the __consumer_offsets topic.",
    )
    parser.add_argument("key", help="record key, hex encoded")
    parser.add_argument(
        "value",
        nargs="?",
        help="record value, hex encoded; omit for a tombstone",
    )
    parser.add_argument(
        "--group-metadata",
        action="store_true",
        help="the key is a bare group id without the key version prefix",
    )
    return parser


def run(argv: list[str] | None = None, config: Config | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = config if config is not None else Config()
    configure_logging(config)

    try:
        key = bytes_from_hex(args.key)
        value = bytes_from_hex(args.value) if args.value is not None else None
    except ValueError as e:
        log.error("invalid hex input", error=str(e))
        return 2

    observer = LoggingOwnershipObserver() if config.REPORT_OWNERSHIP else None
    try:
        if args.group_metadata:
            record = decode_group_metadata_message(key, value, observer)
        else:
            record = decode_consumer_offsets_record(key, value, observer)
    except DecodeError as e:
        log.error("record could not be decoded", field=e.field, error=str(e))
        return 1

    print(json.dumps(record_to_dict(record), indent=2, sort_keys=True))
    return 0


def main():
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        log.info("keyboard interrupt caught, exiting")


if __name__ == "__main__":
    main()
