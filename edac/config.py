"""
edac.config
AUTHOR: carter-vin

Where EDAC data lives

- Defaults are the kernel's sysfs locations
- Env vars override for fake trees (tests, demos, chroots)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

EDAC_MC_SYSFS_PATH = Path("/sys/devices/system/edac/mc")
EDAC_PCI_SYSFS_PATH = Path("/sys/devices/system/edac/pci")

MC_PATH_ENV = "EDAC_MC_PATH"
PCI_PATH_ENV = "EDAC_PCI_PATH"


@dataclass(frozen=True)
class EdacPaths:
    """
    Root paths read by an EdacHandle

    mc_path:
    - directory holding mc0, mc1, ... (required)
    pci_path:
    - directory holding pci_parity_count (optional on the host)
    """

    mc_path: Path = EDAC_MC_SYSFS_PATH
    pci_path: Path = EDAC_PCI_SYSFS_PATH

    @classmethod
    def from_env(cls) -> "EdacPaths":
        """
        Build paths honoring EDAC_MC_PATH / EDAC_PCI_PATH

        Empty env values fall back to the sysfs defaults
        """
        mc = os.getenv(MC_PATH_ENV)
        pci = os.getenv(PCI_PATH_ENV)
        return cls(
            mc_path=Path(mc) if mc else EDAC_MC_SYSFS_PATH,
            pci_path=Path(pci) if pci else EDAC_PCI_SYSFS_PATH,
        )
