"""
edac.sysfs.attrs
AUTHOR: carter-vin

Attribute reader

- The single "attribute missing" policy boundary for the model
- Not-ok is None; callers decide whether that is fatal
- Integer parsing is permissive: leading digits win, trailing text ignored
"""

from __future__ import annotations

from typing import Optional

from edac.sysfs.tree import Node

MAX_ATTR_NAME_LEN = 1023

EDAC_NAME_LEN = 64
EDAC_LABEL_LEN = 256


# Typed key builders for per-channel attributes
def channel_ce_count_attr(index: int) -> str:
    return f"ch{index}_ce_count"


def channel_dimm_label_attr(index: int) -> str:
    return f"ch{index}_dimm_label"


def _read_raw(node: Node, name: str) -> Optional[str]:
    if len(name.encode("utf-8")) > MAX_ATTR_NAME_LEN:
        return None
    return node.attr(name)


def parse_uint(text: str) -> Optional[int]:
    """
    Parse the leading decimal digits of text

    - leading whitespace skipped
    - anything after the digit run is ignored ("12\\n", "12 errors" -> 12)
    - no digits at all -> None (malformed)
    """
    s = text.lstrip()
    end = 0
    while end < len(s) and s[end] in "0123456789":
        end += 1
    if end == 0:
        return None
    return int(s[:end])


def read_uint(node: Node, name: str) -> Optional[int]:
    """
    Read attribute `name` as an unsigned integer
    """
    raw = _read_raw(node, name)
    if raw is None:
        return None
    return parse_uint(raw)


def strip_newline(value: str) -> str:
    """
    Drop exactly one trailing newline
    """
    if value.endswith("\n"):
        return value[:-1]
    return value


def read_string(node: Node, name: str, capacity: int = EDAC_LABEL_LEN) -> Optional[str]:
    """
    Read attribute `name` as text

    - truncated at the first newline
    - bounded to capacity - 1 characters
    """
    raw = _read_raw(node, name)
    if raw is None:
        return None
    value = raw.split("\n", 1)[0]
    return value[: max(capacity - 1, 0)]
