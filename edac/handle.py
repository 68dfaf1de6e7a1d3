"""
edac.handle
AUTHOR: carter-vin

EDAC handle: one session over one point-in-time EDAC snapshot

Lifecycle:
- EdacHandle() does no I/O (configure paths/logger first)
- init() walks the mc tree and builds the topology
- init() again, or reload(), rebuilds controllers from the retained tree
- close() releases the tree nodes and every controller

Threading:
- A handle is single-threaded. Callers sharing one across threads must
  serialize every call (iteration included) themselves.
- A reload invalidates controller and row cursors; do not hold one across it
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from edac.config import EdacPaths
from edac.cursor import Cursor
from edac.errors import (
    AttributeMalformedError,
    AttributeMissingError,
    ConfigurationUnavailableError,
    ControllerEnumerationError,
    EdacError,
    EdacErrorCode,
    InvalidHandleError,
    NoDataError,
    strerror,
)
from edac.logging import EventLogger
from edac.model import McInfo, Totals
from edac.sysfs.attrs import parse_uint
from edac.sysfs.tree import Node, open_device, open_device_tree
from edac.topology import MemoryController, populate_controllers

PCI_PARITY_ATTR = "pci_parity_count"

NodeOpener = Callable[[object], Optional[Node]]


class EdacHandle:
    def __init__(
        self,
        paths: EdacPaths | None = None,
        *,
        logger: EventLogger | None = None,
        open_tree: NodeOpener = open_device_tree,
        open_pci: NodeOpener = open_device,
    ) -> None:
        self.paths = paths if paths is not None else EdacPaths()
        self.logger = logger if logger is not None else EventLogger.null()
        self._open_tree = open_tree
        self._open_pci = open_pci

        self.initialized = False
        self._dev: Optional[Node] = None
        self._pci: Optional[Node] = None
        self._mcs = Cursor(())

        self._totals = Totals()
        self._totals_valid = False

        self.error_code = EdacErrorCode.SUCCESS
        self._error_message = strerror(EdacErrorCode.SUCCESS)

    def __enter__(self) -> "EdacHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -----------------------------
    # Errors
    # -----------------------------
    def _fail(self, error: EdacError) -> EdacError:
        """
        Record error as the handle's last error; caller raises it
        """
        self.error_code = error.code
        self._error_message = str(error)
        self.logger.emit(
            "edac_error",
            severity="verbose",
            error_type=type(error).__name__,
            code=int(error.code),
            message=str(error),
        )
        return error

    def strerror(self) -> str:
        """
        Human-readable description of the last error
        """
        return self._error_message

    @property
    def last_error(self) -> EdacErrorCode:
        return self.error_code

    def _require_initialized(self) -> None:
        if not self.initialized:
            raise self._fail(InvalidHandleError())

    # -----------------------------
    # Lifecycle
    # -----------------------------
    def _rebuild(self) -> None:
        """
        Replace the controller collection from the retained root node

        The old collection and cached totals are dropped first, so a failed
        rebuild leaves the handle with zero controllers.
        """
        self._mcs = Cursor(())
        self._totals_valid = False
        if self._dev is None or not self._dev.exists():
            raise self._fail(ControllerEnumerationError())

        self._mcs = Cursor(populate_controllers(self._dev, self.logger))

    def init(self) -> None:
        """
        Load EDAC data; on an initialized handle this is reload()

        Raises ConfigurationUnavailableError when the mc path cannot be opened
        """
        if self.initialized:
            self.reload()
            return

        dev = self._open_tree(self.paths.mc_path)
        if dev is None:
            raise self._fail(ConfigurationUnavailableError())
        self._dev = dev

        # PCI parity reporting is optional on the host
        self._pci = self._open_pci(self.paths.pci_path)

        self._rebuild()
        self.initialized = True

        self.logger.emit(
            "edac_init",
            severity="debug",
            mc_path=str(self.paths.mc_path),
            pci_present=self._pci is not None,
            mc_count=len(self._mcs),
        )

    def reload(self) -> None:
        """
        Rebuild controllers, reset iteration, invalidate totals

        The root tree node opened by init() is kept
        """
        if not self.initialized:
            raise self._fail(InvalidHandleError())

        self._rebuild()
        self.logger.emit("edac_reload", severity="debug", mc_count=len(self._mcs))

    def close(self) -> None:
        if self.initialized:
            self.logger.emit("edac_close", severity="debug")
        self._mcs = Cursor(())
        self._dev = None
        self._pci = None
        self._totals_valid = False
        self.initialized = False

    # -----------------------------
    # Queries
    # -----------------------------
    def mc_count(self) -> int:
        """
        Number of memory controllers; 0 if none or EDAC is unavailable

        Initializes the handle on first use; never raises
        """
        if not self.initialized:
            try:
                self.init()
            except EdacError:
                return 0
        return len(self._mcs)

    @property
    def controllers(self) -> tuple[MemoryController, ...]:
        return self._mcs.items

    def error_totals(self) -> Totals:
        """
        CE/UE totals over all controllers plus the PCI parity count

        Cached until the next reload; controller-level counters are summed
        """
        self._require_initialized()

        if self._totals_valid:
            return self._totals

        pci_parity = 0
        if self._pci is not None:
            raw = self._pci.attr(PCI_PARITY_ATTR)
            if raw is None:
                raise self._fail(
                    AttributeMissingError(f"Unable to read {PCI_PARITY_ATTR} from EDAC pci data")
                )
            value = parse_uint(raw)
            if value is None:
                raise self._fail(
                    AttributeMalformedError(f"Invalid {PCI_PARITY_ATTR} value: {raw.strip()!r}")
                )
            pci_parity = value

        if len(self._mcs) == 0:
            raise self._fail(NoDataError())

        ce_total = 0
        ue_total = 0
        for mc in self._mcs.items:
            info = mc.info()
            ce_total += info.ce_count
            ue_total += info.ue_count

        self._totals = Totals(ce_total=ce_total, ue_total=ue_total, pci_parity_total=pci_parity)
        self._totals_valid = True

        self.logger.emit("totals_refreshed", severity="debug", **self._totals.to_dict())
        return self._totals

    # -----------------------------
    # Iteration
    # -----------------------------
    def reset(self) -> None:
        """
        Rewind the controller cursor; required before every re-traversal
        """
        self._require_initialized()
        self._mcs.reset()

    def next_mc(self) -> Optional[MemoryController]:
        self._require_initialized()
        return self._mcs.next()

    def next_mc_info(self) -> tuple[Optional[MemoryController], Optional[McInfo]]:
        """
        next_mc() plus its snapshot in one call
        """
        mc = self.next_mc()
        if mc is None:
            return None, None
        return mc, mc.info()

    def iter_mc_info(self) -> Iterator[tuple[MemoryController, McInfo]]:
        """
        Yield (controller, snapshot) pairs in order

        Walks a private cursor; the handle's reset/next position is untouched,
        so traversals may nest.
        """
        self._require_initialized()
        cursor = Cursor(self._mcs.items)
        while True:
            mc = cursor.next()
            if mc is None:
                return
            yield mc, mc.info()
