import pytest

from groupmeta.offsets.types import GroupTombstone
from groupmeta.utils import bytes_from_hex, record_to_dict


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0002", b"\x00\x02"),
        ("0x00ff", b"\x00\xff"),
        ("00 01\n02", b"\x00\x01\x02"),
        ("", b""),
    ],
)
def test_bytes_from_hex(text, expected):
    assert bytes_from_hex(text) == expected


def test_bytes_from_hex_rejects_garbage():
    with pytest.raises(ValueError):
        bytes_from_hex("0xgg")


def test_record_to_dict_names_the_record_type():
    assert record_to_dict(GroupTombstone(group_id="g")) == {
        "group_id": "g",
        "type": "GroupTombstone",
    }
