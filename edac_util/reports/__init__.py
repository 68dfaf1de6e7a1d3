"""edac_util.reports registry."""

from __future__ import annotations

from typing import Iterable

from edac_util.reports.base import ProgramContext, Report
from edac_util.reports.default import DefaultReport
from edac_util.reports.full import FullReport
from edac_util.reports.json import JsonReport
from edac_util.reports.simple import SimpleReport
from edac_util.reports.totals import CeReport, PciReport, UeReport

# Table order decides which report wins an ambiguous prefix
_REPORTS: list[Report] = [
    DefaultReport(),
    SimpleReport(),
    FullReport(),
    UeReport(),
    CeReport(),
    PciReport(),
    JsonReport(),
]

REPORT_NAMES = [report.name for report in _REPORTS]


def get_report_by_name(name: str) -> Report | None:
    """
    First report whose name starts with `name` ("s" -> simple)
    """
    for report in _REPORTS:
        if report.name.startswith(name):
            return report
    return None


def split_report_args(values: Iterable[str]) -> list[str]:
    """
    Flatten repeated/comma-separated --report values, dropping empties
    """
    names: list[str] = []
    for value in values:
        names.extend(part.strip() for part in value.split(",") if part.strip())
    return names


def resolve_reports(names: Iterable[str]) -> tuple[list[Report], list[str]]:
    """
    Map names to reports in request order, without duplicates

    Returns (reports, invalid_names)
    """
    reports: list[Report] = []
    invalid: list[str] = []
    for name in names:
        report = get_report_by_name(name)
        if report is None:
            invalid.append(name)
        elif report not in reports:
            reports.append(report)
    return reports, invalid


__all__ = [
    "REPORT_NAMES",
    "ProgramContext",
    "Report",
    "get_report_by_name",
    "resolve_reports",
    "split_report_args",
]
