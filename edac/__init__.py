"""edac package exports."""

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
)
from edac.handle import EdacHandle
from edac.logging import EventLogger
from edac.model import EDAC_MAX_CHANNELS, ChannelInfo, CsrowInfo, McInfo, Totals
from edac.topology import Csrow, MemoryController

__version__ = "0.1.0"

__all__ = [
    "EDAC_MAX_CHANNELS",
    "AttributeMalformedError",
    "AttributeMissingError",
    "ChannelInfo",
    "ConfigurationUnavailableError",
    "ControllerEnumerationError",
    "Csrow",
    "CsrowInfo",
    "Cursor",
    "EdacError",
    "EdacErrorCode",
    "EdacHandle",
    "EdacPaths",
    "EventLogger",
    "InvalidHandleError",
    "McInfo",
    "MemoryController",
    "NoDataError",
    "Totals",
]
