"""
edac.sysfs.tree
AUTHOR: carter-vin

Device tree walker
- Opens a sysfs directory as a DeviceNode with ordered children
- Attribute reads are live: every attr() call reads the file again
- stdlib only
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol, Sequence


class Node(Protocol):
    """
    What the topology layer needs from a device node

    DeviceNode is the sysfs implementation; tests provide in-memory ones
    """

    name: str

    @property
    def children(self) -> Sequence["Node"]: ...

    def attr(self, name: str) -> Optional[str]: ...

    def exists(self) -> bool: ...


@dataclass
class DeviceNode:
    """
    One sysfs directory

    - name: last path component (mc0, csrow3, ...)
    - children: subdirectory nodes in listing order
    """

    path: Path
    name: str
    children: list["DeviceNode"] = field(default_factory=list)

    def attr(self, name: str) -> Optional[str]:
        """
        Raw text of attribute file `name`, or None when absent/unreadable
        """
        try:
            return (self.path / name).read_text(encoding="utf-8", errors="replace")
        except OSError:
            return None

    def exists(self) -> bool:
        return self.path.is_dir()


def open_device(path: Path | str) -> Optional[DeviceNode]:
    """
    Open a single node without children

    Returns None if path is not a directory
    """
    p = Path(path)
    if not p.is_dir():
        return None
    return DeviceNode(path=p, name=p.name)


def _subdirectories(path: Path) -> list[Path]:
    """
    Real subdirectories of path in listing order

    Symlinks are skipped so links back up the device tree cannot loop
    """
    subdirs: list[Path] = []
    with os.scandir(path) as it:
        for entry in it:
            if entry.is_symlink():
                continue
            if not entry.is_dir(follow_symlinks=False):
                continue
            subdirs.append(Path(entry.path))
    return subdirs


def open_device_tree(path: Path | str) -> Optional[DeviceNode]:
    """
    Recursively open path and every subdirectory under it

    Failure semantics:
    - root cannot be opened -> None
    - root listing fails -> root without children
    - a child that fails to open is left out; siblings are unaffected
    """
    dev = open_device(path)
    if dev is None:
        return None

    try:
        subdirs = _subdirectories(dev.path)
    except OSError:
        return dev

    for subdir in subdirs:
        try:
            child = open_device_tree(subdir)
        except OSError:
            continue
        if child is None:
            continue
        dev.children.append(child)

    return dev
