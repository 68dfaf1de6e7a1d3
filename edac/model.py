"""
edac.model
AUTHOR: carter-vin

Info snapshots + deterministic serialization primitives.

Design goals:
- Snapshots are frozen: callers get copies, never live model state
- Explicit structure (no accidental serialization via __dict__)
- Channel slots keep their index; a row always carries EDAC_MAX_CHANNELS
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable

SCHEMA_VERSION = "1"

EDAC_MAX_CHANNELS = 6


@dataclass(frozen=True)
class ChannelInfo:
    """
    One channel slot in a csrow
    - valid: slot exists on this hardware (chN_ce_count was readable)
    - dimm_label_valid: False -> consumers show display_label instead
    """

    index: int
    valid: bool = False
    ce_count: int = 0
    dimm_label: str = ""
    dimm_label_valid: bool = False

    @property
    def display_label(self) -> str:
        if self.dimm_label_valid:
            return self.dimm_label
        return f"ch{self.index}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "valid": self.valid,
            "ce_count": self.ce_count,
            "dimm_label": self.dimm_label,
            "dimm_label_valid": self.dimm_label_valid,
        }


def empty_channels() -> tuple[ChannelInfo, ...]:
    return tuple(ChannelInfo(index=i) for i in range(EDAC_MAX_CHANNELS))


@dataclass(frozen=True)
class CsrowInfo:
    """
    Chip-select row snapshot
    """

    id: str
    size_mb: int
    ce_count: int
    ue_count: int
    channels: tuple[ChannelInfo, ...]

    def __post_init__(self) -> None:
        if len(self.channels) != EDAC_MAX_CHANNELS:
            raise ValueError(f"csrow must carry {EDAC_MAX_CHANNELS} channel slots")

    def valid_channels(self) -> list[ChannelInfo]:
        return [ch for ch in self.channels if ch.valid]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "size_mb": self.size_mb,
            "ce_count": self.ce_count,
            "ue_count": self.ue_count,
            "channels": [ch.to_dict() for ch in self.channels],
        }


@dataclass(frozen=True)
class McInfo:
    """
    Memory controller snapshot
    - id: topology name (mc0)
    - mc_name: driver-reported model, "" when absent
    """

    id: str
    mc_name: str
    size_mb: int
    ce_count: int
    ce_noinfo_count: int
    ue_count: int
    ue_noinfo_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "mc_name": self.mc_name,
            "size_mb": self.size_mb,
            "ce_count": self.ce_count,
            "ce_noinfo_count": self.ce_noinfo_count,
            "ue_count": self.ue_count,
            "ue_noinfo_count": self.ue_noinfo_count,
        }


@dataclass(frozen=True)
class Totals:
    """
    Handle-wide error totals
    """

    ce_total: int = 0
    ue_total: int = 0
    pci_parity_total: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "ce_total": self.ce_total,
            "ue_total": self.ue_total,
            "pci_parity_total": self.pci_parity_total,
        }


def snapshot_to_dict(
    controllers: Iterable[tuple[McInfo, Iterable[CsrowInfo]]],
    totals: Totals | None,
) -> dict[str, Any]:
    """
    Nest controller and row snapshots into one payload

    totals is None when they could not be computed
    """
    mcs: list[dict[str, Any]] = []
    for mc_info, csrows in controllers:
        entry = mc_info.to_dict()
        entry["csrows"] = [row.to_dict() for row in csrows]
        mcs.append(entry)

    return {
        "schema_version": SCHEMA_VERSION,
        "mc_count": len(mcs),
        "controllers": mcs,
        "totals": totals.to_dict() if totals is not None else None,
    }


def snapshot_to_json(payload: dict[str, Any]) -> str:
    """
    Serialize a snapshot payload

    Rules:
    - sort_keys=True ensures stable key order
    - separators remove whitespace to avoid formatting drift
    """
    return json.dumps(
        payload,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
