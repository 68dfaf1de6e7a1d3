"""
edac_util.reports.base
AUTHOR: carter-vin

Report interface + program context
"""

from __future__ import annotations

from dataclasses import dataclass

from edac.handle import EdacHandle
from edac.logging import EventLogger


@dataclass
class ProgramContext:
    """
    Everything a report needs; passed explicitly, no globals
    - verbose: show zero-count lines too
    - quiet: hide zero-count lines and non-fatal diagnostics
    """

    prog: str
    handle: EdacHandle
    logger: EventLogger
    verbose: int = 0
    quiet: bool = False


class Report:
    name: str = "base"

    def run(self, ctx: ProgramContext) -> list[str]:
        """
        Output lines for this report

        EdacError from the handle propagates; the CLI treats it as fatal
        """
        raise NotImplementedError
