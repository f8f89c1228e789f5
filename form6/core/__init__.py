"""
Core domain layer for Form6.

This module provides:
- Exception hierarchy for consistent error handling
- Shared type definitions

Usage:
    from form6.core import Form6Error, FilingNotFoundError
    from form6.core.base_types import ContextRef, TagName
"""

from .base_types import (
    CategoryMap,
    ContextPredicate,
    ContextRef,
    FileId,
    MileageSource,
    TagName,
)
from .exceptions import (
    ConfigurationError,
    FilingError,
    FilingNotFoundError,
    FilingReadError,
    Form6Error,
    MissingConfigError,
    ParsingError,
    ValuationError,
    XBRLParsingError,
)

__all__ = [
    # Exceptions
    "Form6Error",
    "FilingError",
    "FilingNotFoundError",
    "FilingReadError",
    "ParsingError",
    "XBRLParsingError",
    "ConfigurationError",
    "MissingConfigError",
    "ValuationError",
    # Types
    "FileId",
    "TagName",
    "ContextRef",
    "ContextPredicate",
    "CategoryMap",
    "MileageSource",
]
