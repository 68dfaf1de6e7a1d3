"""
Contract tests for attribute parsing
"""

import pytest

from edac.sysfs.attrs import (
    MAX_ATTR_NAME_LEN,
    channel_ce_count_attr,
    channel_dimm_label_attr,
    parse_uint,
    read_string,
    read_uint,
    strip_newline,
)
from tests.fakes import MemNode


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42\n", 42),
        ("  7", 7),
        ("12 errors\n", 12),
        ("0", 0),
        ("", None),
        ("\n", None),
        ("abc", None),
        ("-3", None),
    ],
)
def test_parse_uint_takes_leading_digits(text: str, expected) -> None:
    """
    Leading digit run is the value; no digits at all is malformed
    """
    assert parse_uint(text) == expected


def test_read_uint_missing_attribute_is_not_ok() -> None:
    """
    A missing attribute reads as None, never 0
    """
    node = MemNode("csrow0", {"ce_count": "3\n"})

    assert read_uint(node, "ce_count") == 3
    assert read_uint(node, "ue_count") is None


def test_read_string_truncates_at_first_newline_and_capacity() -> None:
    """
    Strings stop at the first newline, then at capacity - 1 characters
    """
    node = MemNode("mc0", {"mc_name": "E7525\nstale\n", "long": "A" * 100})

    assert read_string(node, "mc_name") == "E7525"
    assert read_string(node, "long", capacity=8) == "A" * 7
    assert read_string(node, "absent") is None


def test_overlong_attribute_name_is_rejected_without_lookup() -> None:
    """
    Names over the length cap are refused before touching the node
    """
    name = "x" * (MAX_ATTR_NAME_LEN + 1)
    node = MemNode("mc0", {name: "1\n"})

    assert read_uint(node, name) is None
    assert node.reads[name] == 0


def test_channel_key_builders() -> None:
    assert channel_ce_count_attr(0) == "ch0_ce_count"
    assert channel_dimm_label_attr(5) == "ch5_dimm_label"


def test_strip_newline_drops_exactly_one() -> None:
    """
    Only one trailing newline is removed
    """
    assert strip_newline("DIMM_A\n") == "DIMM_A"
    assert strip_newline("DIMM_A\n\n") == "DIMM_A\n"
    assert strip_newline("DIMM_A") == "DIMM_A"
