"""
edac.topology
AUTHOR: carter-vin

Topology model built from the device tree

- mc<N> children of the root become MemoryControllers
- csrow<N> children of a controller become Csrows
- A candidate missing a required counter is left out, never zero-filled
"""

from __future__ import annotations

from typing import Iterator, Optional

from edac.cursor import Cursor
from edac.logging import EventLogger
from edac.model import EDAC_MAX_CHANNELS, ChannelInfo, CsrowInfo, McInfo
from edac.sysfs.attrs import (
    EDAC_LABEL_LEN,
    EDAC_NAME_LEN,
    channel_ce_count_attr,
    channel_dimm_label_attr,
    read_string,
    read_uint,
    strip_newline,
)
from edac.sysfs.tree import Node

MC_PREFIX = "mc"
CSROW_PREFIX = "csrow"

MC_REQUIRED_ATTRS = ("size_mb", "ce_count", "ue_count", "ce_noinfo_count", "ue_noinfo_count")
CSROW_REQUIRED_ATTRS = ("size_mb", "ce_count", "ue_count")


def _read_required(node: Node, names: tuple[str, ...]) -> tuple[dict[str, int], Optional[str]]:
    """
    Read every name as uint; stop at the first failure

    Returns (values, missing_name); missing_name is None on success
    """
    values: dict[str, int] = {}
    for name in names:
        value = read_uint(node, name)
        if value is None:
            return values, name
        values[name] = value
    return values, None


class Csrow:
    """
    One chip-select row; owned by a MemoryController
    """

    def __init__(self, node: Node, info: CsrowInfo) -> None:
        self.node = node
        self._info = info

    @property
    def id(self) -> str:
        return self._info.id

    def info(self) -> CsrowInfo:
        return self._info


class MemoryController:
    """
    One memory controller; owns its Csrows and the cursor over them

    Not thread-safe; see EdacHandle
    """

    def __init__(self, node: Node, info: McInfo, csrows: tuple[Csrow, ...]) -> None:
        self.node = node
        self._info = info
        self._csrows = Cursor(csrows)

    @property
    def id(self) -> str:
        return self._info.id

    @property
    def csrows(self) -> tuple[Csrow, ...]:
        return self._csrows.items

    def info(self) -> McInfo:
        return self._info

    def csrow_count(self) -> int:
        return len(self._csrows)

    def reset(self) -> None:
        self._csrows.reset()

    def next_csrow(self) -> Optional[Csrow]:
        return self._csrows.next()

    def next_csrow_info(self) -> tuple[Optional[Csrow], Optional[CsrowInfo]]:
        """
        next_csrow() plus its snapshot in one call
        """
        csrow = self.next_csrow()
        if csrow is None:
            return None, None
        return csrow, csrow.info()

    def iter_csrow_info(self) -> Iterator[CsrowInfo]:
        """
        Yield every row snapshot in order from a private cursor
        """
        cursor = Cursor(self.csrows)
        while True:
            csrow = cursor.next()
            if csrow is None:
                return
            yield csrow.info()


def populate_channel(row_node: Node, index: int) -> ChannelInfo:
    """
    Build channel slot `index`; always returns a slot, possibly invalid

    chN_ce_count absent is the authoritative "no such channel" signal:
    some drivers expose ch1_* files on single-channel rows
    """
    ce_count = read_uint(row_node, channel_ce_count_attr(index))
    if ce_count is None:
        return ChannelInfo(index=index)

    label = read_string(row_node, channel_dimm_label_attr(index), EDAC_LABEL_LEN)
    label_valid = bool(label)
    label = strip_newline(label or "")

    return ChannelInfo(
        index=index,
        valid=True,
        ce_count=ce_count,
        dimm_label=label,
        dimm_label_valid=label_valid,
    )


def create_csrow(node: Node, logger: EventLogger | None = None) -> Optional[Csrow]:
    if not node.name.startswith(CSROW_PREFIX):
        return None

    values, missing = _read_required(node, CSROW_REQUIRED_ATTRS)
    if missing is not None:
        if logger is not None:
            logger.emit("csrow_skipped", csrow=node.name, missing_attr=missing)
        return None

    info = CsrowInfo(
        id=node.name[: EDAC_NAME_LEN - 1],
        size_mb=values["size_mb"],
        ce_count=values["ce_count"],
        ue_count=values["ue_count"],
        channels=tuple(populate_channel(node, i) for i in range(EDAC_MAX_CHANNELS)),
    )
    return Csrow(node, info)


def populate_rows(mc_node: Node, logger: EventLogger | None = None) -> tuple[Csrow, ...]:
    rows: list[Csrow] = []
    for child in mc_node.children:
        csrow = create_csrow(child, logger)
        if csrow is not None:
            rows.append(csrow)
    return tuple(rows)


def create_controller(node: Node, logger: EventLogger | None = None) -> Optional[MemoryController]:
    """
    Build a MemoryController from an mc<N> node, or None to skip it
    """
    if not node.name.startswith(MC_PREFIX):
        return None

    values, missing = _read_required(node, MC_REQUIRED_ATTRS)
    if missing is not None:
        if logger is not None:
            logger.emit("mc_skipped", mc=node.name, missing_attr=missing)
        return None

    mc_name = read_string(node, "mc_name", EDAC_NAME_LEN)

    info = McInfo(
        id=node.name[: EDAC_NAME_LEN - 1],
        mc_name=strip_newline(mc_name or ""),
        size_mb=values["size_mb"],
        ce_count=values["ce_count"],
        ce_noinfo_count=values["ce_noinfo_count"],
        ue_count=values["ue_count"],
        ue_noinfo_count=values["ue_noinfo_count"],
    )
    return MemoryController(node, info, populate_rows(node, logger))


def populate_controllers(
    root: Node, logger: EventLogger | None = None
) -> tuple[MemoryController, ...]:
    """
    One MemoryController per mc* child that has every required counter

    Zero matches is a valid (empty) result
    """
    controllers: list[MemoryController] = []
    for child in root.children:
        mc = create_controller(child, logger)
        if mc is not None:
            controllers.append(mc)
    return tuple(controllers)
