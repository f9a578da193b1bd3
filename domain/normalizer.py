"""
Domain logic for normalizing MODS bibliographic XML.

This module contains the tree-rewriting operations applied to a parsed
MODS document: whitespace cleanup of text, removal of empty attributes and
empty elements, and conversion of line-break markup into linefeed characters.
All operations mutate the BeautifulSoup tree in place.
"""

import logging
import re
from typing import Iterable, List, Optional, Union

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

# Get logger for this module
logger = logging.getLogger(__name__)

# Marker attributes of <typeOfResource> that must survive text trimming
EXCEPTIONAL_ATTRIBUTES = frozenset({"collection", "manuscript"})

# Elements whose break/paragraph markup is turned into linefeeds
LINEFEED_TAGS = ("tableOfContents", "abstract", "note")

LINE_BREAK_TAG = "br"
PARAGRAPH_TAG = "p"
LINEFEED = "\n"

WHITESPACE_PATTERN = re.compile(r"\s+")
CARRIAGE_RETURN_PATTERN = re.compile(r"\r\n?")


class ModsNormalizer:
    """Normalizes whitespace, attributes, empty elements and linefeeds in MODS XML."""

    def clean_text(self, text: Optional[str]) -> Optional[str]:
        """
        Collapse whitespace runs into single spaces and trim the result.

        Args:
            text: The text to clean

        Returns:
            None for None or an empty string, an empty string for
            whitespace-only input, otherwise the cleaned text
        """
        if not text:
            return None
        return WHITESPACE_PATTERN.sub(" ", text).strip()

    def is_exceptional(self, node: Optional[Tag]) -> bool:
        """Return True when the node carries one of the exception marker attributes."""
        if node is None or not node.attrs:
            return False
        return any(name in node.attrs for name in EXCEPTIONAL_ATTRIBUTES)

    def trim_text(self, node: Tag) -> None:
        """
        Clean the text of every leaf below (and including) the node.

        Leaves are elements without child elements and, in mixed content,
        the non-blank text between child elements. Exceptional elements keep
        their text. Elements without text are left alone; no element is
        removed.

        Raises:
            ValueError: If node is None
        """
        if node is None:
            raise ValueError("trim_text requires a node, got None")

        child_tags = self._child_tags(node)
        if child_tags:
            self.trim_direct_text(node)
            for child in child_tags:
                self.trim_text(child)
            return

        if self.is_exceptional(node):
            logger.debug("Skipping exceptional element <%s>", node.name)
            return

        text = node.get_text()
        if text:
            node.string = self.clean_text(text) or ""

    def trim_direct_text(self, node: Tag) -> None:
        """
        Clean the non-blank text nodes directly inside a mixed-content element.

        Blank text between child elements is kept as it is.
        """
        if node is None:
            raise ValueError("trim_direct_text requires a node, got None")
        if self.is_exceptional(node):
            return

        for text in self._direct_text_nodes(node):
            cleaned = self.clean_text(text)
            if cleaned and cleaned != text:
                text.replace_with(cleaned)

    def remove_empty_attributes(self, node: Tag) -> None:
        """
        Delete the attributes of a single element whose value is blank.

        Raises:
            ValueError: If node is None
        """
        if node is None:
            raise ValueError("remove_empty_attributes requires a node, got None")

        for name, value in list(node.attrs.items()):
            if isinstance(value, list):
                value = " ".join(value)
            if not self.clean_text(value):
                logger.debug("Removing empty attribute %s from <%s>", name, node.name)
                del node.attrs[name]

    def remove_empty_nodes(self, node: Tag) -> None:
        """
        Remove elements that have neither text nor child elements.

        Children are pruned first, so an element emptied by the removal of
        its children is removed as well, including the node passed in.
        Attributes do not keep an element alive.

        Raises:
            ValueError: If node is None
        """
        if node is None:
            raise ValueError("remove_empty_nodes requires a node, got None")

        for child in self._child_tags(node):
            self.remove_empty_nodes(child)

        if node.parent is not None and self._is_empty(node):
            logger.debug("Removing empty element <%s>", node.name)
            node.decompose()

    def clean_linefeeds(self, target: Union[Tag, Iterable[Tag]]) -> None:
        """
        Replace break and paragraph markup with linefeeds and normalize CR/LF.

        Accepts a single element or a sequence of elements, e.g. the result
        of ``soup.find_all(LINEFEED_TAGS)``. Elements whose name is not in
        LINEFEED_TAGS are left unchanged.

        Raises:
            ValueError: If the target, or any element in it, is None
        """
        if target is None:
            raise ValueError("clean_linefeeds requires a node, got None")

        nodes: List[Tag] = [target] if isinstance(target, Tag) else list(target)
        if any(node is None for node in nodes):
            raise ValueError("clean_linefeeds received a None node")

        for node in nodes:
            if node.name not in LINEFEED_TAGS:
                logger.debug("Element <%s> is not linefeed-scoped, skipping", node.name)
                continue

            self._replace_markup(node, LINE_BREAK_TAG, LINEFEED)
            self._replace_markup(node, PARAGRAPH_TAG, LINEFEED * 2)

            for text in self._text_nodes(node):
                cleaned = CARRIAGE_RETURN_PATTERN.sub(LINEFEED, text)
                if cleaned != text:
                    text.replace_with(cleaned)

            node.smooth()

    def _replace_markup(self, node: Tag, tag_name: str, replacement: str) -> None:
        """Put the replacement text where each matching element starts and unwrap it."""
        for markup in node.find_all(tag_name):
            markup.insert_before(replacement)
            markup.unwrap()

    @staticmethod
    def _child_tags(node: Tag) -> List[Tag]:
        return [child for child in node.contents if isinstance(child, Tag)]

    @staticmethod
    def _text_nodes(node: Tag) -> List[NavigableString]:
        # Comments, CDATA and processing instructions are left as they are
        return [
            descendant
            for descendant in node.descendants
            if isinstance(descendant, NavigableString)
            and not isinstance(descendant, PreformattedString)
        ]

    @staticmethod
    def _direct_text_nodes(node: Tag) -> List[NavigableString]:
        return [
            child
            for child in node.contents
            if isinstance(child, NavigableString)
            and not isinstance(child, PreformattedString)
        ]

    def _is_empty(self, node: Tag) -> bool:
        return not self._child_tags(node) and node.get_text() == ""
