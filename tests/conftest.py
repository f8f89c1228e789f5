"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set up environment for testing
os.environ.setdefault("FORM6_ENV", "test")


SAMPLE_FILING = """<?xml version="1.0" encoding="UTF-8"?>
<xbrli:xbrl xmlns:xbrli="http://www.xbrl.org/2003/instance"
            xmlns:ferc="http://ferc.gov/form/2024-01-01/ferc">
  <xbrli:context id="C1"/>
  <!-- prior year first, current year second -->
  <ferc:TrunkRevenues contextRef="C_prior" unitRef="USD">900000</ferc:TrunkRevenues>
  <ferc:TrunkRevenues contextRef="C1" unitRef="USD">1000000</ferc:TrunkRevenues>
  <ferc:GatheringRevenues contextRef="C1" unitRef="USD">250000</ferc:GatheringRevenues>
  <ferc:DeliveryRevenues contextRef="C1" unitRef="USD">50000</ferc:DeliveryRevenues>
  <ferc:OperationExpense contextRef="C1" unitRef="USD">400000</ferc:OperationExpense>
  <ferc:MaintenanceExpense contextRef="C1" unitRef="USD">100000</ferc:MaintenanceExpense>
  <ferc:CarrierProperty contextRef="C1" unitRef="USD">5000000</ferc:CarrierProperty>
  <ferc:AssetsAndOtherDebits contextRef="C1" unitRef="USD">6000000</ferc:AssetsAndOtherDebits>
  <ferc:NetIncome contextRef="C1" unitRef="USD">300000</ferc:NetIncome>
  <ferc:OperatingRevenues contextRef="C_prior" unitRef="USD">0</ferc:OperatingRevenues>
  <ferc:OperatingRevenues contextRef="C1" unitRef="USD">1300000</ferc:OperatingRevenues>
  <ferc:ReturnOnRateBase contextRef="C1" unitRef="USD">0</ferc:ReturnOnRateBase>
  <ferc:AverageNumberOfEmployees contextRef="C1" unitRef="pure">42</ferc:AverageNumberOfEmployees>

  <ferc:PipelineSystemName contextRef="P1">Main Line</ferc:PipelineSystemName>
  <ferc:PipelineSystemIdentifier contextRef="P1">ML-1</ferc:PipelineSystemIdentifier>
  <ferc:MilesOfPipeline contextRef="P1" unitRef="mi">120.5</ferc:MilesOfPipeline>
  <ferc:StateOrTerritory contextRef="P1">TX</ferc:StateOrTerritory>
  <ferc:PipelineSystemName contextRef="P2">Spur</ferc:PipelineSystemName>
  <ferc:MilesOfPipeline contextRef="P2" unitRef="mi">30</ferc:MilesOfPipeline>
  <ferc:StateOrTerritory contextRef="P2">Oklahoma</ferc:StateOrTerritory>
  <ferc:StateOfIncorporation contextRef="C1">DE</ferc:StateOfIncorporation>
  <ferc:StateName contextRef="C1">TX</ferc:StateName>

  <ferc:NameOfContactPerson contextRef="C1">Jane Doe</ferc:NameOfContactPerson>
  <ferc:PreviousName contextRef="C1">0</ferc:PreviousName>

  <ferc:PipelineStartPoint contextRef="S1">Midland</ferc:PipelineStartPoint>
  <ferc:PipelineEndPoint contextRef="S1">Crane</ferc:PipelineEndPoint>
  <ferc:MilesOfGatheringLinesOperated contextRef="S1" unitRef="mi">10</ferc:MilesOfGatheringLinesOperated>
  <ferc:SizeOfGatheringLinesOperated contextRef="S1" unitRef="in">8</ferc:SizeOfGatheringLinesOperated>
  <ferc:PipelineStartPoint contextRef="S2">Crane</ferc:PipelineStartPoint>
  <ferc:PipelineEndPoint contextRef="S2">Houston</ferc:PipelineEndPoint>
  <ferc:MilesOfTrunkLinesForCrudeOilOperated contextRef="S2" unitRef="mi">40</ferc:MilesOfTrunkLinesForCrudeOilOperated>
  <ferc:PipelineStartPoint contextRef="S3">Houston</ferc:PipelineStartPoint>
  <ferc:MilesOfTrunkLinesForProductsOperated contextRef="S3" unitRef="mi">5</ferc:MilesOfTrunkLinesForProductsOperated>
</xbrli:xbrl>
"""

# Reports only operating income and a total-miles figure, no segments
FALLBACK_FILING = """<?xml version="1.0" encoding="UTF-8"?>
<xbrl xmlns="http://www.xbrl.org/2003/instance"
      xmlns:ferc="http://ferc.gov/form/2024-01-01/ferc">
  <ferc:TrunkRevenues contextRef="CurrentYear">2000000</ferc:TrunkRevenues>
  <ferc:NetIncome contextRef="CurrentYear">0</ferc:NetIncome>
  <ferc:NetOperatingIncome contextRef="CurrentYear">750000</ferc:NetOperatingIncome>
  <ferc:TotalMilesOfPipeline contextRef="CurrentYear">812</ferc:TotalMilesOfPipeline>
  <ferc:MilesOfPipeline contextRef="P1">100</ferc:MilesOfPipeline>
</xbrl>
"""

MALFORMED_FILING = "<xbrli:xbrl><ferc:TrunkRevenues>1"

NOT_XBRL_FILING = """<?xml version="1.0"?>
<html><body><p>Not a filing</p></body></html>
"""

SAMPLE_FILE_ID = "Example_Pipeline_Co_form6_Q4_2024.xbrl"
FALLBACK_FILE_ID = "Other,_Pipeline_LLC_form6_Q4_2024.xbrl"
MALFORMED_FILE_ID = "Broken_Pipeline_form6_Q4_2024.xbrl"
NOT_XBRL_FILE_ID = "Html_Export.xbrl"


@pytest.fixture(scope="session", autouse=True)
def setup_logging():
    """Set up logging for tests."""
    from form6.utils.logger import setup_logging
    setup_logging(log_level="WARNING")


@pytest.fixture(scope="session")
def project_root():
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_xbrl_bytes():
    """Sample Form 6 instance document."""
    return SAMPLE_FILING.encode("utf-8")


@pytest.fixture
def fallback_xbrl_bytes():
    """Instance document exercising the fallback rules."""
    return FALLBACK_FILING.encode("utf-8")


@pytest.fixture
def sample_document(sample_xbrl_bytes):
    """Parsed sample filing."""
    from form6.parsers.xbrl_parser import XBRLParser
    return XBRLParser().parse_bytes(sample_xbrl_bytes, SAMPLE_FILE_ID)


@pytest.fixture
def fallback_document(fallback_xbrl_bytes):
    """Parsed fallback filing."""
    from form6.parsers.xbrl_parser import XBRLParser
    return XBRLParser().parse_bytes(fallback_xbrl_bytes, FALLBACK_FILE_ID)


@pytest.fixture
def filings_dir(tmp_path):
    """Filing source directory with good, bad and ignored files."""
    directory = tmp_path / "filings"
    directory.mkdir()
    (directory / SAMPLE_FILE_ID).write_text(SAMPLE_FILING, encoding="utf-8")
    (directory / FALLBACK_FILE_ID).write_text(FALLBACK_FILING, encoding="utf-8")
    (directory / MALFORMED_FILE_ID).write_text(MALFORMED_FILING, encoding="utf-8")
    (directory / NOT_XBRL_FILE_ID).write_text(NOT_XBRL_FILING, encoding="utf-8")
    (directory / "rssfeed").write_text("<rss/>", encoding="utf-8")
    (directory / "notes.txt").write_text("not a filing", encoding="utf-8")
    (directory / "Archive.xbrl").mkdir()
    return directory


@pytest.fixture
def service(filings_dir):
    """Filing service over the sample directory."""
    from form6.service import FilingService
    return FilingService(source_dir=filings_dir)
