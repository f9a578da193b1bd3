"""
Application services for MODS document normalization.

This module contains the application layer service that parses XML,
runs the normalizer operations over the whole document in a fixed order,
and serializes the result.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString
from opentelemetry import trace

from domain.models import NormalizationSummary
from domain.normalizer import LINEFEED_TAGS, ModsNormalizer

# Get logger for this module
logger = logging.getLogger(__name__)

# Get tracer for this module
tracer = trace.get_tracer(__name__)


class DocumentNormalizationService:
    """Service for normalizing whole MODS documents."""

    def __init__(self, normalizer: Optional[ModsNormalizer] = None) -> None:
        self.normalizer = normalizer or ModsNormalizer()
        self.last_summary: Optional[NormalizationSummary] = None

    def parse(self, xml_content: str) -> BeautifulSoup:
        """Parse XML text into a mutable tree."""
        with tracer.start_as_current_span("parse_xml") as span:
            span.set_attribute("xml.content_length", len(xml_content))
            return BeautifulSoup(xml_content, "xml")

    def remove_blank_text(self, soup: BeautifulSoup) -> None:
        """
        Drop whitespace-only text nodes from element-only content.

        Indentation between elements goes away. Text-only elements such as
        ``<title>  </title>`` and mixed content such as
        ``<note>a<br/> <br/>b</note>`` keep their whitespace.
        """
        for tag in soup.find_all(True):
            if not any(isinstance(child, Tag) for child in tag.contents):
                continue
            strings = [
                child
                for child in tag.contents
                if isinstance(child, NavigableString)
                and not isinstance(child, PreformattedString)
            ]
            if any(string.strip() for string in strings):
                continue
            for string in strings:
                string.extract()

    def trim_document_text(self, node: Tag) -> None:
        """
        Apply trim_text below node, leaving linefeed-scoped elements with text alone.

        The linefeeds those elements carry would otherwise be collapsed into
        spaces on the next pass.
        """
        if node.name in LINEFEED_TAGS and node.get_text().strip():
            return

        child_tags = node.find_all(True, recursive=False)
        if not child_tags:
            self.normalizer.trim_text(node)
            return
        self.normalizer.trim_direct_text(node)
        for child in child_tags:
            self.trim_document_text(child)

    def clear_blank_linefeed_elements(self, nodes: List[Tag]) -> None:
        """
        Drop the text of linefeed-scoped elements that hold only whitespace.

        ``<note><br/></note>`` becomes ``<note>\\n</note>`` after linefeed
        cleanup; clearing it lets empty element removal take it out in the
        same pass.
        """
        for node in nodes:
            if node.get_text().strip():
                continue
            for text in node.find_all(string=True):
                if not isinstance(text, PreformattedString):
                    text.extract()

    def normalize_document(self, soup: BeautifulSoup) -> NormalizationSummary:
        """
        Normalize a parsed document in place.

        Steps, in order: blank text removal, text trimming outside
        tableOfContents/abstract/note, empty attribute removal on every
        element, linefeed cleanup of tableOfContents/abstract/note, clearing
        of those left blank, empty element removal. Linefeeds run before
        element removal because a ``<br/>`` is itself an empty element.

        Args:
            soup: The parsed document

        Returns:
            Summary of the changes made
        """
        with tracer.start_as_current_span("normalize_document") as span:
            root = soup.find(True, recursive=False)
            if root is None:
                logger.warning("Document has no root element, nothing to normalize")
                span.set_attribute("document.empty", True)
                self.last_summary = NormalizationSummary()
                return self.last_summary

            summary = NormalizationSummary(
                elements_before=self._count_elements(soup),
                attributes_before=self._count_attributes(soup),
            )
            logger.debug(
                "Normalizing <%s> (%d elements, %d attributes)",
                root.name,
                summary.elements_before,
                summary.attributes_before,
            )

            self.remove_blank_text(soup)
            self.trim_document_text(root)
            for tag in soup.find_all(True):
                self.normalizer.remove_empty_attributes(tag)

            linefeed_nodes = soup.find_all(list(LINEFEED_TAGS))
            self.normalizer.clean_linefeeds(linefeed_nodes)
            self.clear_blank_linefeed_elements(linefeed_nodes)

            self.normalizer.remove_empty_nodes(root)

            summary.elements_after = self._count_elements(soup)
            summary.attributes_after = self._count_attributes(soup)
            summary.linefeed_elements = len(linefeed_nodes)

            for key, value in summary.to_dict().items():
                span.set_attribute(f"normalization.{key}", value)
            logger.info(
                "Removed %d elements and %d attributes, cleaned linefeeds in %d elements",
                summary.elements_removed,
                summary.attributes_removed,
                summary.linefeed_elements,
            )

            self.last_summary = summary
            return summary

    def normalize_xml_string(self, xml_content: str) -> str:
        """
        Normalize XML text and return the serialized result.

        Args:
            xml_content: The XML content to normalize

        Returns:
            The normalized XML document as a string
        """
        soup = self.parse(xml_content)
        self.normalize_document(soup)
        return str(soup)

    def normalize_file(self, file_path: str) -> str:
        """
        Normalize an XML file and return the serialized result.

        Args:
            file_path: Path to the XML file

        Returns:
            The normalized XML document as a string

        Raises:
            FileNotFoundError: If the file doesn't exist
            IOError: If there's an error reading the file
        """
        with tracer.start_as_current_span("read_xml_file") as span:
            span.set_attribute("file.path", file_path)
            logger.debug("Reading XML file: %s", file_path)

            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    xml_content = f.read()

                span.set_attribute("file.size_bytes", len(xml_content))
                logger.debug("Successfully read file (size: %d bytes)", len(xml_content))

                return self.normalize_xml_string(xml_content)
            except FileNotFoundError:
                span.set_attribute("error", True)
                span.set_attribute("error.type", "FileNotFoundError")
                raise
            except IOError as e:
                span.set_attribute("error", True)
                span.set_attribute("error.type", "IOError")
                span.set_attribute("error.message", str(e))
                raise

    @staticmethod
    def _count_elements(soup: BeautifulSoup) -> int:
        return len(soup.find_all(True))

    @staticmethod
    def _count_attributes(soup: BeautifulSoup) -> int:
        return sum(len(tag.attrs) for tag in soup.find_all(True))
