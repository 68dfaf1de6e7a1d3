"""
edac_util.reports.simple
AUTHOR: carter-vin

Per-controller CE/UE counts plus totals
"""

from __future__ import annotations

from edac_util.reports.base import ProgramContext, Report


class SimpleReport(Report):
    name = "simple"

    def run(self, ctx: ProgramContext) -> list[str]:
        lines: list[str] = []
        ce = 0
        ue = 0

        for _mc, info in ctx.handle.iter_mc_info():
            if not ctx.quiet or info.ce_count:
                lines.append(f"{info.id}: Correctable errors:   {info.ce_count}")
            if not ctx.quiet or info.ue_count:
                lines.append(f"{info.id}: Uncorrectable errors: {info.ue_count}")
            ce += info.ce_count
            ue += info.ue_count

        if not ctx.quiet or ce:
            lines.append(f"Total CE: {ce}")
        if not ctx.quiet or ue:
            lines.append(f"Total UE: {ue}")

        return lines
