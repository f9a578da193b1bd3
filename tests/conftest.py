import pytest
from pathlib import Path


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def fixtures_dir(project_root: Path) -> Path:
    """Return the fixtures directory path."""
    return project_root / "tests" / "fixtures"


@pytest.fixture
def sample_mods_content() -> str:
    """Sample MODS record for unit and integration tests."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<mods version="3.6">
  <titleInfo>
    <title>   The   history of
      the   Pacific   coast   </title>
    <subTitle></subTitle>
  </titleInfo>
  <name type="personal" authority="">
    <namePart>  Smith, John  </namePart>
    <role>
      <roleTerm type="text" authority="   "></roleTerm>
    </role>
  </name>
  <typeOfResource collection="yes">  text  </typeOfResource>
  <originInfo>
    <place><placeTerm/></place>
    <dateIssued encoding="w3cdtf">1899</dateIssued>
  </originInfo>
  <abstract>First paragraph.<p>Second paragraph.</p><br/>Signed.</abstract>
  <note type="">Bound with<br/>another volume.</note>
  <note displayLabel="empty"/>
</mods>
"""
