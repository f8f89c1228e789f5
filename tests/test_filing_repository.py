"""Tests for filing enumeration and search."""

import pytest

from form6.core.exceptions import FilingNotFoundError
from form6.storage.filing_repository import FilingRepository, derive_company_name
from conftest import FALLBACK_FILE_ID, MALFORMED_FILE_ID, NOT_XBRL_FILE_ID, SAMPLE_FILE_ID


class TestDeriveCompanyName:
    """Tests for display names derived from file names."""

    def test_quarter_suffix_removed(self):
        assert derive_company_name(SAMPLE_FILE_ID) == "Example Pipeline Co"

    def test_commas_removed(self):
        assert derive_company_name(FALLBACK_FILE_ID) == "Other Pipeline LLC"

    def test_without_suffix_marker(self):
        assert derive_company_name("Html_Export.xbrl") == "Html Export"
        assert derive_company_name("plain") == "plain"

    def test_custom_marker(self):
        assert derive_company_name("Acme_FY2024.xml", "_FY", ".xml") == "Acme"

    def test_idempotent(self):
        name = derive_company_name(SAMPLE_FILE_ID)
        assert derive_company_name(name) == name


class TestFilingRepository:
    """Tests for FilingRepository."""

    @pytest.fixture
    def repository(self, filings_dir):
        return FilingRepository(filings_dir)

    def test_list_filings(self, repository):
        ids = {f.id for f in repository.list_filings()}
        assert ids == {SAMPLE_FILE_ID, FALLBACK_FILE_ID, MALFORMED_FILE_ID, NOT_XBRL_FILE_ID}

    def test_excludes_non_filings(self, repository):
        ids = [f.id for f in repository.list_filings()]
        assert "rssfeed" not in ids
        assert "notes.txt" not in ids
        assert "Archive.xbrl" not in ids

    def test_descriptor_fields(self, repository, filings_dir):
        descriptor = next(f for f in repository.list_filings() if f.id == SAMPLE_FILE_ID)

        assert descriptor.company == "Example Pipeline Co"
        assert descriptor.path == filings_dir / SAMPLE_FILE_ID
        assert descriptor.to_dict() == {
            "id": SAMPLE_FILE_ID,
            "company": "Example Pipeline Co",
            "file": str(filings_dir / SAMPLE_FILE_ID),
        }

    def test_listing_is_repeatable(self, repository):
        assert repository.list_filings() == repository.list_filings()

    def test_missing_directory(self, tmp_path):
        repository = FilingRepository(tmp_path / "does-not-exist")
        assert repository.list_filings() == []
        assert repository.search("pipeline") == []

    def test_search_case_insensitive(self, repository):
        ids = {f.id for f in repository.search("PIPELINE")}
        assert ids == {SAMPLE_FILE_ID, FALLBACK_FILE_ID, MALFORMED_FILE_ID}

    def test_search_subset_of_listing(self, repository):
        listed = repository.list_filings()
        for term in ("co", "llc", "export", "zzz"):
            assert all(f in listed for f in repository.search(term))

    def test_search_exact_name(self, repository):
        for filing in repository.list_filings():
            assert filing in repository.search(filing.company)

    def test_search_no_match(self, repository):
        assert repository.search("nonexistent") == []

    def test_resolve(self, repository):
        descriptor = repository.resolve(SAMPLE_FILE_ID)
        assert descriptor.company == "Example Pipeline Co"
        assert descriptor.path.is_file()

    @pytest.mark.parametrize(
        "file_id",
        ["missing.xbrl", "", ".", "..", "../filings/x.xbrl", "sub/dir.xbrl", "Archive.xbrl"],
    )
    def test_resolve_not_found(self, repository, file_id):
        with pytest.raises(FilingNotFoundError) as exc_info:
            repository.resolve(file_id)
        assert exc_info.value.file_id == file_id
