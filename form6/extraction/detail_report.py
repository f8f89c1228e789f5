"""
Detail report assembly.

Builds the exhaustive categorized report for one filing: pipeline systems,
pipeline segments, mileage totals, states, company information and the
nine numeric category maps from the taxonomy tables.

Repeated facts carry no explicit link between related tags; a segment's
end point, miles and diameters are recovered by matching context ids with
its start point. When several start points share one context, the k-th
start point of that context is paired with the k-th value of the same
context. Pipeline names take their mileage and states the same way, but
their identifiers by position: the i-th name gets the i-th identifier.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from ..core.base_types import CategoryMap, ContextPredicate, MileageSource
from ..parsers.xbrl_parser import FilingDocument, ResolvedFact, ValueResolver, in_context
from ..utils.config import DetailReportConfig, get_settings
from ..utils.logger import get_logger
from .taxonomy import (
    CATEGORY_FIELDS,
    COMPANY_INFO_FIELDS,
    PIPELINE_ID_TAG,
    PIPELINE_MILES_TAG,
    PIPELINE_NAME_TAG,
    PIPELINE_STATE_TAG,
    SEGMENT_END_TAG,
    SEGMENT_MEASURE_TAGS,
    SEGMENT_MILEAGE_TOTALS,
    SEGMENT_START_TAG,
    STATE_TAGS,
    TOTAL_MILES_TAG,
)

logger = get_logger("form6.extraction.detail_report")


@dataclass
class PipelineSystem:
    """A pipeline system reported in the filing."""
    name: str
    id: str
    miles: Optional[float] = None
    states: list[str] = field(default_factory=list)


@dataclass
class PipelineSegment:
    """One reported segment with its endpoints and per-category measures."""
    start_point: str
    end_point: str
    gathering_miles: Optional[float] = None
    gathering_diameter: Optional[float] = None
    trunk_crude_miles: Optional[float] = None
    trunk_crude_diameter: Optional[float] = None
    trunk_product_miles: Optional[float] = None
    trunk_product_diameter: Optional[float] = None


@dataclass
class DetailReport:
    """
    Categorized detail report of one filing.

    Category maps only hold reported, non-zero values; a missing label means
    the filing does not report it.

    Mileage is computed two ways. ``pipeline_total_miles`` comes from the
    reported total-miles tag or, failing that, the sum of distinct per-pipeline
    mileage facts. ``segment_total_miles`` is the sum of the per-category
    segment mileage and is None when the filing has no segments.
    ``total_miles`` is the canonical figure and ``total_miles_source`` names
    which computation produced it.
    """
    company_name: str
    file_name: str
    pipelines: list[PipelineSystem] = field(default_factory=list)
    pipeline_segments: list[PipelineSegment] = field(default_factory=list)
    states: list[str] = field(default_factory=list)
    company_info: dict[str, str] = field(default_factory=dict)

    total_miles: float = 0.0
    total_miles_source: Optional[MileageSource] = None
    pipeline_total_miles: float = 0.0
    segment_total_miles: Optional[float] = None
    total_gathering_miles: Optional[float] = None
    total_trunk_crude_miles: Optional[float] = None
    total_trunk_products_miles: Optional[float] = None

    financial_data: CategoryMap = field(default_factory=dict)
    revenues: CategoryMap = field(default_factory=dict)
    operating_expenses: CategoryMap = field(default_factory=dict)
    general_expenses: CategoryMap = field(default_factory=dict)
    asset_data: CategoryMap = field(default_factory=dict)
    liabilities_equity: CategoryMap = field(default_factory=dict)
    cash_flow: CategoryMap = field(default_factory=dict)
    operational_data: CategoryMap = field(default_factory=dict)
    rate_base: CategoryMap = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @property
    def has_segments(self) -> bool:
        return bool(self.pipeline_segments)

    def category(self, name: str) -> CategoryMap:
        """Category map by attribute name (e.g. ``"rate_base"``)."""
        if name not in CATEGORY_FIELDS:
            raise KeyError(f"Unknown detail report category: {name}")
        return getattr(self, name)


def _nth(facts: list[ResolvedFact], index: int) -> Optional[ResolvedFact]:
    return facts[index] if index < len(facts) else None


class DetailReportAssembler:
    """Assembles a DetailReport from a parsed filing."""

    def __init__(
        self,
        config: Optional[DetailReportConfig] = None,
        is_current_context: Optional[ContextPredicate] = None,
    ) -> None:
        self.config = config or get_settings().detail_report
        self.is_current_context = is_current_context

    def assemble(self, document: FilingDocument, company_name: str) -> DetailReport:
        resolver = ValueResolver(document, self.is_current_context)
        report = DetailReport(company_name=company_name, file_name=document.source_name)

        report.pipelines = self._pipelines(resolver)
        report.states = self._states(resolver)
        report.company_info = self._company_info(resolver)

        for attribute, fields in CATEGORY_FIELDS.items():
            setattr(report, attribute, self._category(resolver, fields))

        report.pipeline_segments = self._segments(resolver)
        self._mileage(resolver, report)

        logger.debug(
            f"Detail report for {document.source_name}: {len(report.pipelines)} pipelines, "
            f"{len(report.pipeline_segments)} segments, {len(report.states)} states"
        )
        return report

    # -------------------------------------------------------------------------
    # Sections
    # -------------------------------------------------------------------------

    def _category(self, resolver: ValueResolver, fields: dict[str, str]) -> CategoryMap:
        """First non-zero value of each tag in document order, keyed by label."""
        values: CategoryMap = {}
        for tag, label in fields.items():
            value = resolver.first_value(tag)
            if value:
                values[label] = value
        return values

    def _company_info(self, resolver: ValueResolver) -> dict[str, str]:
        info = {}
        for tag, label in COMPANY_INFO_FIELDS.items():
            text = resolver.first_text(tag)
            if text:
                info[label] = text
        return info

    def _states(self, resolver: ValueResolver) -> list[str]:
        """Distinct short state codes from the state-like text tags."""
        max_length = self.config.state_code_max_length
        states: dict[str, None] = {}
        for tag in STATE_TAGS:
            for fact in resolver.texts(tag):
                if len(fact.value) <= max_length:
                    states.setdefault(fact.value, None)
        return list(states)

    def _pipelines(self, resolver: ValueResolver) -> list[PipelineSystem]:
        names = resolver.texts(PIPELINE_NAME_TAG)
        ids = resolver.texts(PIPELINE_ID_TAG)
        miles = resolver.values(PIPELINE_MILES_TAG)
        states = resolver.texts(PIPELINE_STATE_TAG)

        pipelines = []
        seen_per_context: dict[str, int] = {}
        for position, name in enumerate(names, start=1):
            k = seen_per_context.get(name.context_ref, 0)
            seen_per_context[name.context_ref] = k + 1

            pipeline_id = _nth(ids, position - 1)
            pipeline_miles = _nth(in_context(miles, name.context_ref), k)

            pipelines.append(PipelineSystem(
                name=name.value,
                id=pipeline_id.value if pipeline_id else f"Pipeline {position}",
                miles=pipeline_miles.value if pipeline_miles else None,
                states=[s.value for s in in_context(states, name.context_ref)],
            ))
        return pipelines

    def _segments(self, resolver: ValueResolver) -> list[PipelineSegment]:
        starts = resolver.texts(SEGMENT_START_TAG)
        if not starts:
            return []

        ends = resolver.texts(SEGMENT_END_TAG)
        measures = {name: resolver.values(tag) for name, tag in SEGMENT_MEASURE_TAGS.items()}

        segments = []
        seen_per_context: dict[str, int] = {}
        for start in starts:
            k = seen_per_context.get(start.context_ref, 0)
            seen_per_context[start.context_ref] = k + 1

            end = _nth(in_context(ends, start.context_ref), k)
            segment = PipelineSegment(
                start_point=start.value,
                end_point=end.value if end else self.config.unknown_endpoint,
            )
            for name, facts in measures.items():
                match = _nth(in_context(facts, start.context_ref), k)
                if match is not None:
                    setattr(segment, name, match.value)
            segments.append(segment)
        return segments

    def _mileage(self, resolver: ValueResolver, report: DetailReport) -> None:
        """Fill both mileage computations and pick the canonical total."""
        reported_total = resolver.first_value(TOTAL_MILES_TAG)
        if reported_total is not None:
            report.pipeline_total_miles = reported_total
        else:
            distinct = dict.fromkeys(f.value for f in resolver.values(PIPELINE_MILES_TAG))
            report.pipeline_total_miles = float(sum(distinct))

        if report.has_segments:
            for attribute, tag in SEGMENT_MILEAGE_TOTALS.items():
                setattr(report, attribute, float(sum(f.value for f in resolver.values(tag))))
            report.segment_total_miles = (
                report.total_gathering_miles
                + report.total_trunk_crude_miles
                + report.total_trunk_products_miles
            )

        if self.config.mileage_policy == "segments_first" and report.segment_total_miles is not None:
            report.total_miles = report.segment_total_miles
            report.total_miles_source = "segments"
        elif report.pipeline_total_miles:
            report.total_miles = report.pipeline_total_miles
            report.total_miles_source = "pipelines"
        else:
            report.total_miles = 0.0
            report.total_miles_source = None
