from pathlib import Path
from typing import List

from bs4 import BeautifulSoup


def load_xml_fixture(fixture_name: str, fixtures_dir: Path) -> str:
    """
    Load XML fixture content from the fixtures directory.

    Args:
        fixture_name: Name of the XML fixture file
        fixtures_dir: Path to the fixtures directory

    Returns:
        XML content as string

    Raises:
        FileNotFoundError: If fixture doesn't exist
    """
    fixture_path = fixtures_dir / "xml" / fixture_name
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture not found: {fixture_path}")
    return fixture_path.read_text(encoding="utf-8")


def load_expected_xml(fixture_name: str, fixtures_dir: Path) -> str:
    """
    Load the expected normalized output for a fixture.

    Raises:
        FileNotFoundError: If expected output doesn't exist
    """
    expected_path = fixtures_dir / "expected" / fixture_name
    if not expected_path.exists():
        raise FileNotFoundError(f"Expected output not found: {expected_path}")
    return expected_path.read_text(encoding="utf-8")


def get_all_fixtures(fixtures_dir: Path) -> List[str]:
    """Get list of all XML fixture files."""
    xml_dir = fixtures_dir / "xml"
    return sorted(f.name for f in xml_dir.glob("*.xml") if f.is_file())


def canonical_xml(xml_content: str) -> str:
    """Re-serialize XML so documents can be compared independent of formatting."""
    return str(BeautifulSoup(xml_content, "xml"))
