"""Locating and editing the SAM CLI executable."""

from .field import SamExecutableField, setup_sam_selection_elements
from .locator import (
    SAM_EXECUTABLE_ENV,
    ExecutableInfo,
    InvalidExecutableError,
    SamExecutableLocator,
)

__all__ = [
    "SamExecutableField",
    "setup_sam_selection_elements",
    "SAM_EXECUTABLE_ENV",
    "ExecutableInfo",
    "InvalidExecutableError",
    "SamExecutableLocator",
]
