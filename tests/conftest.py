"""
Shared fixtures
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from tests.fakes import write_tree

TreeFactory = Callable[..., tuple[Path, Path]]


@pytest.fixture
def sysfs_tree(tmp_path: Path) -> TreeFactory:
    """
    Factory: (mc_layout, pci_layout=None) -> (mc_path, pci_path)

    pci_layout None leaves the pci directory absent
    """

    def _build(mc_layout: dict[str, Any], pci_layout: Optional[dict[str, Any]] = None) -> tuple[Path, Path]:
        mc_path = write_tree(tmp_path / "edac" / "mc", mc_layout)
        pci_path = tmp_path / "edac" / "pci"
        if pci_layout is not None:
            write_tree(pci_path, pci_layout)
        return mc_path, pci_path

    return _build
