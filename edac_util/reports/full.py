"""
edac_util.reports.full
AUTHOR: carter-vin

Machine-parsable per-channel report: mc:csrow:label:TYPE:count
"""

from __future__ import annotations

from edac_util.reports.base import ProgramContext, Report


class FullReport(Report):
    name = "full"

    def run(self, ctx: ProgramContext) -> list[str]:
        lines: list[str] = []

        for mc, mci in ctx.handle.iter_mc_info():
            for csi in mc.iter_csrow_info():
                for ch in csi.valid_channels():
                    if not ctx.quiet or ch.ce_count:
                        lines.append(f"{mci.id}:{csi.id}:{ch.display_label}:CE:{ch.ce_count}")

            if not ctx.quiet or mci.ue_noinfo_count:
                lines.append(f"{mci.id}:noinfo:all:UE:{mci.ue_noinfo_count}")
            if not ctx.quiet or mci.ce_noinfo_count:
                lines.append(f"{mci.id}:noinfo:all:CE:{mci.ce_noinfo_count}")

        return lines
