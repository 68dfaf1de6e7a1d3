"""
edac_util.reports.json
AUTHOR: carter-vin

Whole snapshot as one JSON object
"""

from __future__ import annotations

from edac.errors import EdacError
from edac.model import snapshot_to_dict, snapshot_to_json
from edac_util.reports.base import ProgramContext, Report


class JsonReport(Report):
    name = "json"

    def run(self, ctx: ProgramContext) -> list[str]:
        controllers = [
            (mci, list(mc.iter_csrow_info())) for mc, mci in ctx.handle.iter_mc_info()
        ]

        # Totals failure is reported in-band; controller data is still useful
        totals_error = None
        try:
            totals = ctx.handle.error_totals()
        except EdacError as e:
            totals = None
            totals_error = str(e)

        payload = snapshot_to_dict(controllers, totals)
        payload["totals_error"] = totals_error
        return [snapshot_to_json(payload)]
