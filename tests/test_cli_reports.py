"""
Contract tests for edac-util reports and exit codes
"""

import json

from typer.testing import CliRunner

from edac_util.cli import app
from edac_util.reports import get_report_by_name, resolve_reports, split_report_args
from tests.fakes import csrow_attrs, e7525_layout, mc_attrs


def _invoke(mc_path, pci_path, args):
    runner = CliRunner()
    return runner.invoke(
        app,
        args,
        env={"EDAC_MC_PATH": str(mc_path), "EDAC_PCI_PATH": str(pci_path)},
    )


def _busy_layout():
    return {
        "mc0": {
            **mc_attrs(ce=3, ue=1, ce_noinfo=1, ue_noinfo=0),
            "mc_name": "i5000\n",
            "csrow0": {
                **csrow_attrs(ce=2, ue=1),
                "ch0_ce_count": "2\n",
                "ch0_dimm_label": "DIMM_A\n",
                "ch1_ce_count": "0\n",
            },
        },
        "mc1": {**mc_attrs(ce=4)},
    }


def test_default_report_lists_dimm_errors(sysfs_tree) -> None:
    """
    Default report prints one CE line per labelled channel
    """
    mc_path, pci_path = sysfs_tree(e7525_layout())

    result = _invoke(mc_path, pci_path, [])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["mc0: csrow0: DIMM_A: 5 Corrected Errors"]


def test_default_report_verbose_uses_synthetic_labels(sysfs_tree) -> None:
    """
    -v adds zero counts and falls back to chN for unlabelled channels
    """
    mc_path, pci_path = sysfs_tree(_busy_layout())

    result = _invoke(mc_path, pci_path, ["-v", "-r", "default"])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert "mc0: 0 Uncorrected Errors with no DIMM info" in lines
    assert "mc0: 1 Corrected Errors with no DIMM info" in lines
    assert "mc0: csrow0: 1 Uncorrected Errors" in lines
    assert "mc0: csrow0: DIMM_A: 2 Corrected Errors" in lines
    assert "mc0: csrow0: ch1: 0 Corrected Errors" in lines


def test_no_errors_message_and_quiet(sysfs_tree) -> None:
    """
    All-zero counts print a notice that -q suppresses
    """
    mc_path, pci_path = sysfs_tree({"mc0": mc_attrs()})

    loud = _invoke(mc_path, pci_path, [])
    quiet = _invoke(mc_path, pci_path, ["-q"])

    assert loud.stdout.splitlines() == ["edac-util: No errors to report."]
    assert quiet.exit_code == 0
    assert quiet.stdout == ""


def test_multiple_reports_in_request_order(sysfs_tree) -> None:
    """
    Repeated -r values run in order with duplicates dropped
    """
    mc_path, pci_path = sysfs_tree(_busy_layout(), {"pci_parity_count": "3\n"})

    result = _invoke(mc_path, pci_path, ["-r", "simple,ue", "-r", "ce,pci,simple"])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    # Controller order follows directory listing order
    assert set(lines[:4]) == {
        "mc0: Correctable errors:   3",
        "mc0: Uncorrectable errors: 1",
        "mc1: Correctable errors:   4",
        "mc1: Uncorrectable errors: 0",
    }
    assert lines[4:6] == ["Total CE: 7", "Total UE: 1"]
    assert lines[6:] == ["UE: 1", "CE: 7", "PCI Parity Errors: 3"]


def test_full_report(sysfs_tree) -> None:
    """
    full prints colon-separated lines per channel and per noinfo counter
    """
    mc_path, pci_path = sysfs_tree(_busy_layout())

    result = _invoke(mc_path, pci_path, ["-r", "full"])

    assert result.exit_code == 0
    assert sorted(result.stdout.splitlines()) == [
        "mc0:csrow0:DIMM_A:CE:2",
        "mc0:csrow0:ch1:CE:0",
        "mc0:noinfo:all:CE:1",
        "mc0:noinfo:all:UE:0",
        "mc1:noinfo:all:CE:0",
        "mc1:noinfo:all:UE:0",
    ]


def test_json_report(sysfs_tree) -> None:
    """
    json emits the whole snapshot including all channel slots
    """
    mc_path, pci_path = sysfs_tree(e7525_layout())

    result = _invoke(mc_path, pci_path, ["-r", "json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["mc_count"] == 1
    assert payload["totals"] == {"ce_total": 5, "ue_total": 0, "pci_parity_total": 0}
    assert payload["totals_error"] is None
    channels = payload["controllers"][0]["csrows"][0]["channels"]
    assert len(channels) == 6
    assert channels[0]["dimm_label"] == "DIMM_A"
    assert channels[1]["valid"] is False


def test_invalid_report_exits_1(sysfs_tree) -> None:
    """
    An unknown report name is an error and exits 1
    """
    mc_path, pci_path = sysfs_tree(e7525_layout())

    result = _invoke(mc_path, pci_path, ["-r", "simple,bogus"])

    assert result.exit_code == 1
    assert 'Invalid report: \\"bogus\\"' in result.output


def test_report_and_status_are_exclusive(sysfs_tree) -> None:
    """
    --status with --report is fatal
    """
    mc_path, pci_path = sysfs_tree(e7525_layout())

    result = _invoke(mc_path, pci_path, ["-s", "-r", "simple"])

    assert result.exit_code == 1
    assert "Only specify one of --report or --status" in result.output


def test_missing_edac_is_fatal(tmp_path) -> None:
    """
    A missing mc directory is fatal with the library error text
    """
    result = _invoke(tmp_path / "absent", tmp_path / "pci", [])

    assert result.exit_code == 1
    assert "Unable to get EDAC data: Unable to find EDAC data in sysfs" in result.output


def test_no_controllers_is_reported_not_fatal(sysfs_tree) -> None:
    """
    Zero controllers is an error message but exit 0
    """
    mc_path, pci_path = sysfs_tree({"power": {}})

    result = _invoke(mc_path, pci_path, [])

    assert result.exit_code == 0
    assert "No memory controller data found." in result.output


def test_unreadable_pci_parity_is_fatal_for_totals(sysfs_tree) -> None:
    """
    Totals reports fail when pci_parity_count cannot be read
    """
    mc_path, pci_path = sysfs_tree(e7525_layout(), {})

    result = _invoke(mc_path, pci_path, ["-r", "ue"])

    assert result.exit_code == 1
    assert "Unable to get EDAC error totals" in result.output


def test_status(sysfs_tree) -> None:
    """
    Status reports the controller count; -v lists id:mc_name per controller
    """
    mc_path, pci_path = sysfs_tree(_busy_layout())

    plain = _invoke(mc_path, pci_path, ["-s"])
    verbose = _invoke(mc_path, pci_path, ["-s", "-v"])

    assert plain.exit_code == 0
    assert plain.output.splitlines() == ["edac-util: EDAC drivers are loaded. 2 MCs detected"]
    lines = verbose.output.splitlines()
    assert lines[0] == "edac-util: EDAC drivers are loaded. 2 MCs detected:"
    assert sorted(lines[1:]) == ["  mc0:i5000", "  mc1:"]


def test_status_without_controllers_exits_1(sysfs_tree) -> None:
    """
    Status with no controllers exits 1
    """
    mc_path, pci_path = sysfs_tree({})

    result = _invoke(mc_path, pci_path, ["-s"])

    assert result.exit_code == 1
    assert "No memory controllers found" in result.output


def test_quiet_status_prints_nothing_but_keeps_exit_code(sysfs_tree, tmp_path) -> None:
    """
    -q silences status lines; the exit code still reflects the controller count
    """
    mc_path, pci_path = sysfs_tree(_busy_layout())
    empty_mc = tmp_path / "empty_mc"
    empty_mc.mkdir()

    loaded = _invoke(mc_path, pci_path, ["-q", "-s"])
    empty = _invoke(empty_mc, pci_path, ["-q", "-s"])

    assert loaded.exit_code == 0
    assert loaded.output == ""
    assert empty.exit_code == 1
    assert empty.output == ""


def test_path_option_overrides_environment(sysfs_tree, tmp_path) -> None:
    """
    --mc-path wins over EDAC_MC_PATH
    """
    mc_path, pci_path = sysfs_tree(e7525_layout())

    result = _invoke(tmp_path / "absent", pci_path, ["--mc-path", str(mc_path), "-r", "simple"])

    assert result.exit_code == 0
    assert "mc0: Correctable errors:   5" in result.stdout


def test_report_name_resolution() -> None:
    """
    Prefix lookup, comma splitting and de-duplication of report names
    """
    assert get_report_by_name("s").name == "simple"
    assert get_report_by_name("p").name == "pci"
    assert get_report_by_name("nope") is None

    names = split_report_args(["ue, ce", "", "ue"])
    reports, invalid = resolve_reports(names)

    assert names == ["ue", "ce", "ue"]
    assert [r.name for r in reports] == ["ue", "ce"]
    assert invalid == []
