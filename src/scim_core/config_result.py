"""Configuration loading result object.

This module defines a standard result object for configuration loading operations.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .config import CoreConfig


@dataclass
class ConfigResult:
    """Result of a configuration loading operation.

    Attributes:
        success: Whether the operation was successful
        config: Parsed configuration (if successful)
        error: Error message (if unsuccessful)
        exception: Original exception (if an error occurred)
        path: Path to the configuration file (if applicable)
    """

    success: bool
    config: Optional["CoreConfig"] = None
    error: Optional[str] = None
    exception: Optional[Exception] = None
    path: Optional[str] = None
