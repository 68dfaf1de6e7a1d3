"""
edac_util.reports.totals
AUTHOR: carter-vin

Single-counter reports backed by handle totals
"""

from __future__ import annotations

from edac_util.reports.base import ProgramContext, Report


class UeReport(Report):
    name = "ue"

    def run(self, ctx: ProgramContext) -> list[str]:
        tot = ctx.handle.error_totals()
        if not ctx.quiet or tot.ue_total:
            return [f"UE: {tot.ue_total}"]
        return []


class CeReport(Report):
    name = "ce"

    def run(self, ctx: ProgramContext) -> list[str]:
        tot = ctx.handle.error_totals()
        if not ctx.quiet or tot.ce_total:
            return [f"CE: {tot.ce_total}"]
        return []


class PciReport(Report):
    name = "pci"

    def run(self, ctx: ProgramContext) -> list[str]:
        tot = ctx.handle.error_totals()
        if not ctx.quiet or tot.pci_parity_total:
            return [f"PCI Parity Errors: {tot.pci_parity_total}"]
        return []
