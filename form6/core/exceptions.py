"""
Core exception hierarchy for Form6.

All custom exceptions inherit from Form6Error for consistent error handling.
"""

from typing import Optional


class Form6Error(Exception):
    """Base exception for all Form6 errors."""

    def __init__(self, message: str, context: Optional[dict] = None):
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | Context: {self.context}"
        return self.message


# Filing Errors
class FilingError(Form6Error):
    """Error locating or reading a filing."""
    pass


class FilingNotFoundError(FilingError):
    """Requested filing does not exist in the source directory."""

    def __init__(self, file_id: str, source_dir: Optional[str] = None):
        self.file_id = file_id
        context = {"source_dir": source_dir} if source_dir else None
        super().__init__(f"Filing not found: {file_id}", context)


class FilingReadError(FilingError):
    """Filing exists but could not be read."""
    pass


# Parsing Errors
class ParsingError(Form6Error):
    """Error during document parsing."""
    pass


class XBRLParsingError(ParsingError):
    """Error parsing XBRL data."""
    pass


# Configuration Errors
class ConfigurationError(Form6Error):
    """Configuration error."""
    pass


class MissingConfigError(ConfigurationError):
    """Required configuration is missing."""
    pass


# Valuation Errors
class ValuationError(Form6Error):
    """Invalid valuation calculator input."""
    pass
