"""
Filing repository over the filing source directory.

Enumerates the Form 6 filings available on disk, derives display names from
their file names, searches them by company name and resolves filing ids to
paths.
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from ..core.base_types import FileId
from ..core.exceptions import FilingNotFoundError
from ..utils.config import FilingsConfig, get_config
from ..utils.logger import get_logger

logger = get_logger("form6.storage.filing_repository")

DEFAULT_SUFFIX_MARKER = "_form6_Q"
DEFAULT_EXTENSION = ".xbrl"


def derive_company_name(
    file_name: str,
    suffix_marker: str = DEFAULT_SUFFIX_MARKER,
    extension: str = DEFAULT_EXTENSION,
) -> str:
    """
    Derive a display name from a filing file name.

    ``Example_Pipeline_Co_form6_Q4_2024.xbrl`` -> ``Example Pipeline Co``.
    Everything from the quarter suffix marker on is dropped; without the
    marker only the extension is dropped. Underscores become spaces and
    commas are removed.
    """
    base = file_name
    marker_at = base.find(suffix_marker) if suffix_marker else -1
    if marker_at != -1:
        base = base[:marker_at]
    elif extension and base.endswith(extension):
        base = base[: -len(extension)]
    return base.replace("_", " ").replace(",", "")


@dataclass(frozen=True)
class FilingDescriptor:
    """A filing available in the source directory."""
    id: FileId
    company: str
    file: str

    @property
    def path(self) -> Path:
        return Path(self.file)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class FilingRepository:
    """Read-only access to the filings in one directory."""

    def __init__(
        self,
        source_dir: Optional[Path] = None,
        config: Optional[FilingsConfig] = None,
    ) -> None:
        """
        Initialize repository.

        Args:
            source_dir: Filing directory. Defaults to the configured one.
            config: Filing settings. Defaults to global settings.
        """
        app_config = get_config()
        self.config = config or app_config.settings.filings
        self.source_dir = Path(source_dir) if source_dir is not None else app_config.filings_dir

    def company_name(self, file_name: str) -> str:
        return derive_company_name(
            file_name,
            suffix_marker=self.config.name_suffix_marker,
            extension=self.config.extension,
        )

    def _is_filing(self, path: Path) -> bool:
        return (
            path.name.endswith(self.config.extension)
            and path.name not in self.config.excluded_names
            and path.is_file()
        )

    def list_filings(self) -> list[FilingDescriptor]:
        """
        List every filing in the source directory, in directory-listing order.

        A missing directory is logged and yields an empty list.
        """
        if not self.source_dir.is_dir():
            logger.warning(f"Filing directory not found: {self.source_dir}")
            return []

        filings = [
            FilingDescriptor(
                id=path.name,
                company=self.company_name(path.name),
                file=str(path),
            )
            for path in self.source_dir.iterdir()
            if self._is_filing(path)
        ]
        logger.debug(f"Found {len(filings)} filings in {self.source_dir}")
        return filings

    def search(self, term: str) -> list[FilingDescriptor]:
        """
        Filings whose derived company name contains ``term`` (case-insensitive).

        Callers reject blank terms before searching.
        """
        needle = term.lower()
        results = [f for f in self.list_filings() if needle in f.company.lower()]
        logger.info(f"Search '{term}' matched {len(results)} filing(s)")
        return results

    def resolve(self, file_id: FileId) -> FilingDescriptor:
        """
        Resolve a filing id to its descriptor.

        Raises:
            FilingNotFoundError: No such file in the source directory, or the
                id is not a bare file name.
        """
        path = self.source_dir / file_id
        if (
            not file_id
            or Path(file_id).name != file_id
            or file_id in (".", "..")
            or not path.is_file()
        ):
            logger.warning(f"Filing not found: {file_id!r} in {self.source_dir}")
            raise FilingNotFoundError(file_id, str(self.source_dir))

        return FilingDescriptor(id=file_id, company=self.company_name(file_id), file=str(path))
