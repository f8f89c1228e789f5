"""
Filing service: the operations the web layer calls.

Every extraction reads, parses and discards one filing. Nothing parsed is
kept between calls, so concurrent requests are independent.

Outcomes:
- ``FilingNotFoundError`` when the id does not name a file in the source
  directory.
- ``FilingReadError`` when the file exists but cannot be read.
- ``None`` ("no data") when the file is not a usable XBRL instance; the
  parse failure is logged.
"""

import asyncio
import time
from pathlib import Path
from typing import Optional

from .business.valuation import ValuationAssumptions, ValuationResult, value_pipeline
from .core.base_types import ContextPredicate, FileId
from .core.exceptions import XBRLParsingError
from .extraction.detail_report import DetailReport, DetailReportAssembler
from .extraction.summary import FinancialSummary, SummaryExtractor
from .parsers.contexts import CurrentContextPolicy
from .parsers.xbrl_parser import FilingDocument, XBRLParser, read_filing_bytes
from .storage.filing_repository import FilingDescriptor, FilingRepository
from .utils.config import DetailReportConfig, get_config
from .utils.logger import get_logger, log_operation

logger = get_logger("form6.service")


class FilingService:
    """
    Enumerate, search and extract Form 6 filings.

    Example:
        service = FilingService()
        for filing in service.search("pipeline"):
            summary = service.get_financial_summary(filing.id)
    """

    def __init__(
        self,
        source_dir: Optional[Path] = None,
        repository: Optional[FilingRepository] = None,
        parser: Optional[XBRLParser] = None,
        is_current_context: Optional[ContextPredicate] = None,
        detail_config: Optional[DetailReportConfig] = None,
    ) -> None:
        """
        Initialize service.

        Args:
            source_dir: Filing directory (ignored when ``repository`` is given).
            repository: Filing repository. Built from config if not provided.
            parser: XBRL parser.
            is_current_context: Context predicate. Defaults to the configured
                CurrentContextPolicy.
            detail_config: Detail report settings.
        """
        self.config = get_config()
        self.repository = repository or FilingRepository(source_dir)
        self.parser = parser or XBRLParser()
        self.is_current_context = is_current_context or CurrentContextPolicy.from_config(
            self.config.settings.context_policy
        )
        self.summary_extractor = SummaryExtractor(self.is_current_context)
        self.detail_assembler = DetailReportAssembler(
            detail_config or self.config.settings.detail_report,
            self.is_current_context,
        )

    @property
    def report_year(self) -> int:
        return self.config.settings.filings.report_year

    # -------------------------------------------------------------------------
    # Enumeration and search
    # -------------------------------------------------------------------------

    def list_filings(self) -> list[FilingDescriptor]:
        return self.repository.list_filings()

    def search(self, term: str) -> list[FilingDescriptor]:
        return self.repository.search(term)

    # -------------------------------------------------------------------------
    # Extraction
    # -------------------------------------------------------------------------

    def _parse(self, descriptor: FilingDescriptor, data: bytes) -> Optional[FilingDocument]:
        try:
            return self.parser.parse_bytes(data, descriptor.id)
        except XBRLParsingError as e:
            filing_logger = get_logger("form6.service", {"file_id": descriptor.id})
            filing_logger.error(f"Unparseable filing {descriptor.id}: {e}")
            return None

    def _load(self, file_id: FileId) -> tuple[FilingDescriptor, Optional[FilingDocument]]:
        descriptor = self.repository.resolve(file_id)
        return descriptor, self._parse(descriptor, read_filing_bytes(descriptor.path))

    async def _load_async(
        self, file_id: FileId
    ) -> tuple[FilingDescriptor, Optional[FilingDocument]]:
        descriptor = self.repository.resolve(file_id)
        data = await asyncio.to_thread(read_filing_bytes, descriptor.path)
        return descriptor, self._parse(descriptor, data)

    def _summarize(
        self, descriptor: FilingDescriptor, document: Optional[FilingDocument]
    ) -> Optional[FinancialSummary]:
        if document is None:
            return None
        return self.summary_extractor.extract(document, descriptor.company)

    def _detail(
        self, descriptor: FilingDescriptor, document: Optional[FilingDocument]
    ) -> Optional[DetailReport]:
        if document is None:
            return None
        return self.detail_assembler.assemble(document, descriptor.company)

    def get_financial_summary(self, file_id: FileId) -> Optional[FinancialSummary]:
        """
        Financial summary of one filing.

        Raises:
            FilingNotFoundError: Unknown filing id.
            FilingReadError: The filing could not be read.
        """
        start_time = time.time()
        descriptor, document = self._load(file_id)
        summary = self._summarize(descriptor, document)
        log_operation(
            logger,
            "financial_summary",
            success=summary is not None,
            duration_ms=(time.time() - start_time) * 1000,
            file_id=file_id,
        )
        return summary

    def get_detail_report(self, file_id: FileId) -> Optional[DetailReport]:
        """
        Detail report of one filing.

        Raises:
            FilingNotFoundError: Unknown filing id.
            FilingReadError: The filing could not be read.
        """
        start_time = time.time()
        descriptor, document = self._load(file_id)
        report = self._detail(descriptor, document)
        log_operation(
            logger,
            "detail_report",
            success=report is not None,
            duration_ms=(time.time() - start_time) * 1000,
            file_id=file_id,
        )
        return report

    def get_valuation(
        self,
        file_id: FileId,
        as_of_year: Optional[int] = None,
    ) -> Optional[ValuationResult]:
        """Valuation with assumptions derived from the filing's summary."""
        summary = self.get_financial_summary(file_id)
        if summary is None:
            return None
        assumptions = ValuationAssumptions.from_summary(
            summary,
            report_year=self.report_year,
            as_of_year=as_of_year,
            config=self.config.settings.valuation,
        )
        return value_pipeline(assumptions)

    # -------------------------------------------------------------------------
    # Async variants (suspend only while reading the file)
    # -------------------------------------------------------------------------

    async def get_financial_summary_async(self, file_id: FileId) -> Optional[FinancialSummary]:
        descriptor, document = await self._load_async(file_id)
        return self._summarize(descriptor, document)

    async def get_detail_report_async(self, file_id: FileId) -> Optional[DetailReport]:
        descriptor, document = await self._load_async(file_id)
        return self._detail(descriptor, document)

    async def list_filings_async(self) -> list[FilingDescriptor]:
        return await asyncio.to_thread(self.repository.list_filings)

    async def search_async(self, term: str) -> list[FilingDescriptor]:
        return await asyncio.to_thread(self.repository.search, term)
