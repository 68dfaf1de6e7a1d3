"""
edac_util.status
AUTHOR: carter-vin

EDAC driver status display (--status)
"""

from __future__ import annotations

from edac_util.reports.base import ProgramContext


def _mc_phrase(count: int) -> str:
    return f"{count} MCs" if count > 1 else f"{count} MC"


def render_status(ctx: ProgramContext) -> tuple[list[str], int]:
    """
    Status lines and the exit code to use

    Exit code 1 when drivers are loaded but no controller was found
    """
    count = ctx.handle.mc_count()
    if count == 0:
        return [f"{ctx.prog}: EDAC drivers loaded. No memory controllers found"], 1

    if not ctx.verbose:
        return [f"{ctx.prog}: EDAC drivers are loaded. {_mc_phrase(count)} detected"], 0

    lines = [f"{ctx.prog}: EDAC drivers are loaded. {_mc_phrase(count)} detected:"]
    for _mc, info in ctx.handle.iter_mc_info():
        lines.append(f"  {info.id}:{info.mc_name}")
    return lines, 0
