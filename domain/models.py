"""
Domain models for document normalization.

This module contains the result entities produced by a normalization pass.
"""

from typing import Dict


class NormalizationSummary:
    """Counts describing what a whole-document normalization pass changed."""

    def __init__(
        self,
        elements_before: int = 0,
        elements_after: int = 0,
        attributes_before: int = 0,
        attributes_after: int = 0,
        linefeed_elements: int = 0,
    ):
        self.elements_before = elements_before
        self.elements_after = elements_after
        self.attributes_before = attributes_before
        self.attributes_after = attributes_after
        self.linefeed_elements = linefeed_elements

    @property
    def elements_removed(self) -> int:
        return self.elements_before - self.elements_after

    @property
    def attributes_removed(self) -> int:
        return self.attributes_before - self.attributes_after

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary representation."""
        return {
            "elements_before": self.elements_before,
            "elements_after": self.elements_after,
            "elements_removed": self.elements_removed,
            "attributes_before": self.attributes_before,
            "attributes_after": self.attributes_after,
            "attributes_removed": self.attributes_removed,
            "linefeed_elements": self.linefeed_elements,
        }

    def __repr__(self) -> str:
        return (
            f"NormalizationSummary(elements_removed={self.elements_removed}, "
            f"attributes_removed={self.attributes_removed}, "
            f"linefeed_elements={self.linefeed_elements})"
        )
