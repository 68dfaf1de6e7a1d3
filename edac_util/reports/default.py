"""
edac_util.reports.default
AUTHOR: carter-vin

Per-DIMM error report
"""

from __future__ import annotations

from edac_util.reports.base import ProgramContext, Report


class DefaultReport(Report):
    name = "default"

    def run(self, ctx: ProgramContext) -> list[str]:
        lines: list[str] = []
        count = 0

        for mc, mci in ctx.handle.iter_mc_info():
            if mci.ue_noinfo_count or ctx.verbose:
                lines.append(f"{mci.id}: {mci.ue_noinfo_count} Uncorrected Errors with no DIMM info")
            if mci.ce_noinfo_count or ctx.verbose:
                lines.append(f"{mci.id}: {mci.ce_noinfo_count} Corrected Errors with no DIMM info")

            count += mci.ce_noinfo_count + mci.ue_noinfo_count

            for csi in mc.iter_csrow_info():
                count += csi.ue_count

                if csi.ue_count or ctx.verbose:
                    lines.append(f"{mci.id}: {csi.id}: {csi.ue_count} Uncorrected Errors")

                for ch in csi.valid_channels():
                    count += ch.ce_count
                    if ch.ce_count or ctx.verbose:
                        lines.append(
                            f"{mci.id}: {csi.id}: {ch.display_label}: {ch.ce_count} Corrected Errors"
                        )

        if not count and not ctx.quiet:
            lines.append(f"{ctx.prog}: No errors to report.")

        return lines
