"""Form 6 filing parsers module."""

from .contexts import CurrentContextPolicy
from .xbrl_parser import (
    FilingDocument,
    ResolvedFact,
    TaggedElement,
    ValueResolver,
    XBRLParser,
    in_context,
    read_filing_bytes,
    to_number,
)

__all__ = [
    "CurrentContextPolicy",
    "FilingDocument",
    "ResolvedFact",
    "TaggedElement",
    "ValueResolver",
    "XBRLParser",
    "in_context",
    "read_filing_bytes",
    "to_number",
]
