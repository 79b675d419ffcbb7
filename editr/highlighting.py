"""Per-character highlight classification.

Only digits are recognized for now; this is the place to plug in richer
syntax coloring.
"""

from enum import Enum


class HighlightType(Enum):
    """Highlight categories a grapheme can belong to."""
    NONE = "none"
    NUMBER = "number"


def classify(grapheme: str) -> HighlightType:
    """Classify a single grapheme cluster by its first code point."""
    if grapheme and grapheme[0] in "0123456789":
        return HighlightType.NUMBER
    return HighlightType.NONE


def highlight_graphemes(graphemes: list[str]) -> list[HighlightType]:
    """Return one highlight category per grapheme."""
    return [classify(g) for g in graphemes]
