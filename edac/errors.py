"""
edac.errors
AUTHOR: carter-vin

Error codes + exception hierarchy for the EDAC library

Contract:
- Whole-operation failures raise an EdacError subclass carrying its code
- Per-node failures (one mc, csrow, channel) never raise; they are omitted
- strerror() gives the operator-facing text for a code
"""

from __future__ import annotations

from enum import IntEnum


class EdacErrorCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    OUT_OF_MEMORY = 2
    BAD_HANDLE = 3
    OPEN_FAILED = 4
    MC_OPEN_FAILED = 5
    CSROW_OPEN_FAILED = 6
    NO_DATA = 7
    ATTR_MISSING = 8
    ATTR_MALFORMED = 9


_MESSAGES: dict[EdacErrorCode, str] = {
    EdacErrorCode.SUCCESS: "Success",
    EdacErrorCode.ERROR: "Internal error",
    EdacErrorCode.OUT_OF_MEMORY: "Out of memory",
    EdacErrorCode.BAD_HANDLE: "Invalid EDAC library handle",
    EdacErrorCode.OPEN_FAILED: "Unable to find EDAC data in sysfs",
    EdacErrorCode.MC_OPEN_FAILED: "Unable to open EDAC memory controller in sysfs",
    EdacErrorCode.CSROW_OPEN_FAILED: "Unable to open csrow in sysfs",
    EdacErrorCode.NO_DATA: "No EDAC memory controller data",
    EdacErrorCode.ATTR_MISSING: "EDAC attribute missing in sysfs",
    EdacErrorCode.ATTR_MALFORMED: "EDAC attribute value malformed",
}


def strerror(code: int) -> str:
    """
    Descriptive text for an error code; unknown codes never raise
    """
    try:
        return _MESSAGES[EdacErrorCode(code)]
    except ValueError:
        return "Unknown error"


class EdacError(Exception):
    """Base exception for all EDAC library errors."""

    code: EdacErrorCode = EdacErrorCode.ERROR

    def __init__(self, message: str | None = None, code: EdacErrorCode | None = None) -> None:
        if code is not None:
            self.code = code
        super().__init__(message or strerror(self.code))


class ConfigurationUnavailableError(EdacError):
    """The controller root path cannot be opened: no EDAC support active."""

    code = EdacErrorCode.OPEN_FAILED


class ControllerEnumerationError(EdacError):
    """The controller collection could not be (re)built."""

    code = EdacErrorCode.MC_OPEN_FAILED


class AttributeMissingError(EdacError):
    """A required attribute was absent or unreadable."""

    code = EdacErrorCode.ATTR_MISSING


class AttributeMalformedError(EdacError):
    """A required attribute did not parse."""

    code = EdacErrorCode.ATTR_MALFORMED


class NoDataError(EdacError):
    """Totals were requested but no memory controllers are present."""

    code = EdacErrorCode.NO_DATA


class InvalidHandleError(EdacError):
    """Operation on a handle that is closed or was never initialized."""

    code = EdacErrorCode.BAD_HANDLE
