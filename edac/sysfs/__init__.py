"""edac.sysfs package exports."""

from edac.sysfs.attrs import (
    EDAC_LABEL_LEN,
    EDAC_NAME_LEN,
    MAX_ATTR_NAME_LEN,
    channel_ce_count_attr,
    channel_dimm_label_attr,
    parse_uint,
    read_string,
    read_uint,
    strip_newline,
)
from edac.sysfs.tree import DeviceNode, Node, open_device, open_device_tree

__all__ = [
    "EDAC_LABEL_LEN",
    "EDAC_NAME_LEN",
    "MAX_ATTR_NAME_LEN",
    "DeviceNode",
    "Node",
    "channel_ce_count_attr",
    "channel_dimm_label_attr",
    "open_device",
    "open_device_tree",
    "parse_uint",
    "read_string",
    "read_uint",
    "strip_newline",
]
