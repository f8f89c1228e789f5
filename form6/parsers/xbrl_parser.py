"""
XBRL parser for FERC Form 6 filings.

Reads a Form 6 instance document into an index of tagged elements keyed by
prefixed tag name, and resolves those elements to scalar values.
"""

import io
import math
import time
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..core.base_types import ContextPredicate, ContextRef, TagName
from ..core.exceptions import FilingReadError, XBRLParsingError
from ..utils.logger import get_logger
from .contexts import CurrentContextPolicy

logger = get_logger("form6.parsers.xbrl")

# Accepted local names of the document root
ROOT_LOCAL_NAMES = ("xbrl",)


def to_number(text: Optional[str]) -> Optional[float]:
    """
    Convert fact text to a float.

    Returns None for missing, empty or unconvertible text. Thousands
    separators are tolerated.
    """
    if text is None:
        return None
    cleaned = text.strip().replace(",", "")
    if not cleaned:
        return None
    try:
        number = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def read_filing_bytes(path: Path) -> bytes:
    """
    Read a filing from disk.

    Raises:
        FilingReadError: The file could not be read.
    """
    path = Path(path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise FilingReadError(
            f"Failed to read filing {path.name}", {"path": str(path), "error": str(e)}
        ) from e


@dataclass(frozen=True)
class TaggedElement:
    """One occurrence of a tag inside a filing."""
    tag: TagName
    text: Optional[str]
    context_ref: ContextRef = ""
    unit_ref: Optional[str] = None

    @property
    def number(self) -> Optional[float]:
        return to_number(self.text)


@dataclass(frozen=True)
class ResolvedFact:
    """A resolved value paired with its context and unit."""
    value: float | str
    context_ref: ContextRef
    unit_ref: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "context": self.context_ref,
            "unit_ref": self.unit_ref,
        }


@dataclass
class FilingDocument:
    """Parsed filing: tagged elements indexed by tag name in document order."""
    source_name: str
    root_tag: TagName
    elements: dict[TagName, list[TaggedElement]] = field(default_factory=dict)
    parse_time_ms: float = 0.0

    def elements_for(self, tag: TagName) -> list[TaggedElement]:
        """All elements carrying ``tag``, in document order."""
        return self.elements.get(tag, [])

    def __contains__(self, tag: object) -> bool:
        return tag in self.elements

    @property
    def tag_names(self) -> list[TagName]:
        return list(self.elements)

    @property
    def element_count(self) -> int:
        # an element indexed under several prefixes counts once
        return len({id(e) for v in self.elements.values() for e in v})


class XBRLParser:
    """
    Parser for Form 6 XBRL instance documents.

    Uses plain XML parsing: facts are the direct children of the ``xbrl``
    root, and each is indexed under ``prefix:LocalName`` for the prefixes
    in scope where it appears.
    """

    def parse_file(self, path: Path) -> FilingDocument:
        """
        Read and parse a filing from disk.

        Raises:
            FilingReadError: The file could not be read.
            XBRLParsingError: The content is not a usable XBRL instance.
        """
        return self.parse_bytes(read_filing_bytes(path), Path(path).name)

    def parse_bytes(self, data: bytes, source_name: str = "<memory>") -> FilingDocument:
        """
        Parse raw document bytes.

        Each fact is indexed under every prefix bound to its namespace where
        it appears, so ``ferc:X`` resolves even when the same namespace is
        also the default one or carries a second prefix.

        Raises:
            XBRLParsingError: Malformed XML, unrecognised root or empty root.
        """
        start_time = time.time()

        scopes: list[dict[str, str]] = [{}]
        pending: dict[str, str] = {}
        root_tag: Optional[TagName] = None
        depth = 0
        fact_count = 0
        elements: dict[TagName, list[TaggedElement]] = {}

        try:
            for event, item in ET.iterparse(io.BytesIO(data), events=("start-ns", "start", "end")):
                if event == "start-ns":
                    prefix, uri = item
                    pending[prefix] = uri
                    continue

                if event == "start":
                    scopes.append({**scopes[-1], **pending} if pending else scopes[-1])
                    pending = {}
                    depth += 1
                    if depth == 1:
                        root_tag = self._qualified_names(item.tag, scopes[-1])[0]
                        if self._local_name(item.tag) not in ROOT_LOCAL_NAMES:
                            raise XBRLParsingError(
                                f"Unrecognised root element in {source_name}", {"root": root_tag}
                            )
                    continue

                scope = scopes.pop()
                depth -= 1
                if depth != 1:
                    continue

                # Direct child of the root
                names = self._qualified_names(item.tag, scope)
                text = item.text.strip() if item.text is not None else None
                element = TaggedElement(
                    tag=names[0],
                    text=text or None,
                    context_ref=item.get("contextRef", ""),
                    unit_ref=item.get("unitRef"),
                )
                for name in names:
                    elements.setdefault(name, []).append(element)
                fact_count += 1
                item.clear()
        except ET.ParseError as e:
            raise XBRLParsingError(
                f"Malformed XML in {source_name}", {"error": str(e)}
            ) from e

        if fact_count == 0:
            raise XBRLParsingError(f"Empty XBRL root in {source_name}", {"root": root_tag})

        elapsed_ms = (time.time() - start_time) * 1000
        document = FilingDocument(
            source_name=source_name,
            root_tag=root_tag,
            elements=elements,
            parse_time_ms=elapsed_ms,
        )
        logger.debug(
            f"Parsed {source_name}: {fact_count} elements, "
            f"{len(elements)} tags in {elapsed_ms:.0f}ms"
        )
        return document

    @staticmethod
    def _local_name(tag: str) -> str:
        if tag.startswith("{"):
            return tag.split("}", 1)[1]
        return tag

    def _qualified_names(self, tag: str, scope: dict[str, str]) -> list[TagName]:
        """
        Turn ``{uri}Local`` back into ``prefix:Local`` for each prefix bound
        to ``uri`` in ``scope``. Prefixed names come first; the bare local
        name stands for the default namespace or an undeclared one.
        """
        if not tag.startswith("{"):
            return [tag]
        uri, local_name = tag[1:].split("}", 1)
        prefixes = [p for p, bound in scope.items() if bound == uri]
        names = [f"{p}:{local_name}" for p in prefixes if p]
        if "" in prefixes or not names:
            names.append(local_name)
        return names


class ValueResolver:
    """
    Resolves tags of one parsed filing to scalar values.

    ``value`` picks one element per tag using the current-context predicate,
    ``values``/``texts`` return every usable occurrence for repeated facts.
    """

    def __init__(
        self,
        document: FilingDocument,
        is_current_context: Optional[ContextPredicate] = None,
    ) -> None:
        self.document = document
        self.is_current_context = is_current_context or CurrentContextPolicy.from_config()

    def select(self, tag: TagName) -> Optional[TaggedElement]:
        """
        Pick the element for ``tag``.

        The first element in document order whose context satisfies the
        predicate wins. When none does, the first element is used as a last
        resort regardless of its context.
        """
        elements = self.document.elements_for(tag)
        if not elements:
            return None

        for element in elements:
            if self.is_current_context(element.context_ref):
                return element

        logger.debug(
            f"No current context for {tag} in {self.document.source_name}, "
            f"falling back to first of {len(elements)} element(s)"
        )
        return elements[0]

    def value(self, tag: TagName) -> Optional[float]:
        """Numeric value of ``tag`` under the context policy, or None if absent."""
        element = self.select(tag)
        if element is None:
            return None
        return element.number

    def value_or_zero(self, tag: TagName) -> float:
        number = self.value(tag)
        return number if number is not None else 0.0

    def values(self, tag: TagName) -> list[ResolvedFact]:
        """Every non-zero numeric occurrence of ``tag`` with its context and unit."""
        facts = []
        for element in self.document.elements_for(tag):
            number = element.number
            if number is None or number == 0:
                continue
            facts.append(ResolvedFact(number, element.context_ref, element.unit_ref))
        return facts

    def texts(self, tag: TagName) -> list[ResolvedFact]:
        """Every non-empty text occurrence of ``tag`` (a bare "0" counts as empty)."""
        facts = []
        for element in self.document.elements_for(tag):
            text = element.text
            if not text or text == "0":
                continue
            facts.append(ResolvedFact(text, element.context_ref, element.unit_ref))
        return facts

    def first_value(self, tag: TagName) -> Optional[float]:
        """First non-zero numeric occurrence in document order."""
        facts = self.values(tag)
        return facts[0].value if facts else None

    def first_text(self, tag: TagName) -> Optional[str]:
        """First non-empty text occurrence in document order."""
        facts = self.texts(tag)
        return facts[0].value if facts else None


def in_context(facts: list[ResolvedFact], context_ref: ContextRef) -> list[ResolvedFact]:
    """Facts sharing ``context_ref``, in their original order."""
    return [f for f in facts if f.context_ref == context_ref]
