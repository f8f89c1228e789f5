"""Financial summary and detail report extraction."""

from .detail_report import DetailReport, DetailReportAssembler, PipelineSegment, PipelineSystem
from .summary import FinancialSummary, SummaryExtractor

__all__ = [
    "DetailReport",
    "DetailReportAssembler",
    "FinancialSummary",
    "PipelineSegment",
    "PipelineSystem",
    "SummaryExtractor",
]
