"""Filing source access."""

from .filing_repository import FilingDescriptor, FilingRepository, derive_company_name

__all__ = ["FilingDescriptor", "FilingRepository", "derive_company_name"]
