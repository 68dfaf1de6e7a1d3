"""
edac_util.cli
AUTHOR: carter-vin

edac-util: report EDAC memory error counts from sysfs

Exit codes:
- 0: success (including "no memory controller data found")
- 1: fatal error, invalid report, or no controllers with --status
- 2: usage error (typer)
"""

from __future__ import annotations

from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from edac.config import MC_PATH_ENV, PCI_PATH_ENV, EdacPaths
from edac.errors import EdacError
from edac.handle import EdacHandle
from edac.logging import EventLogger
from edac_util.reports import REPORT_NAMES, ProgramContext, resolve_reports, split_report_args
from edac_util.status import render_status

PROG = "edac-util"

app = typer.Typer(
    add_completion=False,
    help="edac-util: report EDAC memory error counts",
)


def _fatal(logger: EventLogger, message: str) -> NoReturn:
    logger.emit("fatal", severity="fatal", message=message)
    raise typer.Exit(code=1)


@app.command()
def main(
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Display only non-zero error counts and fatal errors.",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity. Multiple -v's may be used.",
    ),
    status: bool = typer.Option(
        False,
        "--status",
        "-s",
        help="Display EDAC status.",
    ),
    report: Optional[List[str]] = typer.Option(
        None,
        "--report",
        "-r",
        help=f"Display EDAC error report(s), comma separated: {', '.join(REPORT_NAMES)}.",
    ),
    mc_path: Optional[str] = typer.Option(
        None,
        "--mc-path",
        help=f"EDAC memory controller directory (default: ${MC_PATH_ENV} or sysfs).",
    ),
    pci_path: Optional[str] = typer.Option(
        None,
        "--pci-path",
        help=f"EDAC PCI directory (default: ${PCI_PATH_ENV} or sysfs).",
    ),
) -> None:
    """
    Display EDAC error reports (default report when none is given)
    """
    logger = EventLogger(prog=PROG, verbose=verbose, quiet=quiet)

    if report and status:
        _fatal(logger, "Only specify one of --report or --status")

    names = split_report_args(report or []) or ["default"]
    reports, invalid = resolve_reports(names)

    for name in invalid:
        logger.emit("report_invalid", severity="error", report=name, message=f'Invalid report: "{name}"')
    if invalid:
        raise typer.Exit(code=1)

    defaults = EdacPaths.from_env()
    handle = EdacHandle(
        EdacPaths(
            mc_path=Path(mc_path) if mc_path else defaults.mc_path,
            pci_path=Path(pci_path) if pci_path else defaults.pci_path,
        ),
        logger=logger,
    )

    with handle:
        try:
            handle.init()
        except EdacError:
            _fatal(logger, f"Unable to get EDAC data: {handle.strerror()}")

        ctx = ProgramContext(
            prog=PROG,
            handle=handle,
            logger=logger,
            verbose=verbose,
            quiet=quiet,
        )

        if status:
            # Status is a diagnostic: stderr, silenced by --quiet
            lines, code = render_status(ctx)
            if not quiet:
                for line in lines:
                    typer.echo(line, err=True)
            raise typer.Exit(code=code)

        if handle.mc_count() == 0:
            logger.emit("no_mc_data", severity="error", message="No memory controller data found.")
            return

        for selected in reports:
            try:
                lines = selected.run(ctx)
            except EdacError:
                _fatal(logger, f"Unable to get EDAC error totals: {handle.strerror()}")
            for line in lines:
                typer.echo(line)


if __name__ == "__main__":
    app()
