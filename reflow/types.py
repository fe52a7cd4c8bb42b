"""
Unified Data Types for Reflow Engine
====================================
All stages exchange these types. No ad-hoc dicts past the extraction edge.

Type Hierarchy:
- Transform: Six-element affine text matrix
- TextFragment: Positioned text run from the extraction layer
- Line: Fragments sharing a visual baseline
- DocumentUnreadableError: Extraction failure for a whole document
"""

import math
from dataclasses import dataclass
from typing import Tuple, Dict, Any, Optional, Sequence


# ============================================================
# Primitive Types
# ============================================================

# Affine text matrix: (scaleX, skewY, skewX, scaleY, x, y)
Transform = Tuple[float, float, float, float, float, float]

DEFAULT_FONT_HEIGHT = 10.0


def is_usable_height(value: Optional[float]) -> bool:
    """True for a finite, positive height"""
    if value is None:
        return False
    try:
        return math.isfinite(value) and value > 0
    except TypeError:
        return False


# ============================================================
# Core Data Structures
# ============================================================

@dataclass(frozen=True)
class TextFragment:
    """
    A positioned run of text with no line or paragraph identity.

    Attributes:
        content: Raw string, may be empty or whitespace-only
        x: Horizontal position in page units
        y: Vertical position, increasing toward the top of the page
        font_height: Approximate glyph height (None when unknown)
        width: Run width, kept for later layout work
        height: Run height, kept for later layout work
    """
    content: str
    x: float
    y: float
    font_height: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None

    @property
    def is_blank(self) -> bool:
        return not self.content.strip()

    @classmethod
    def from_transform(
        cls,
        content: str,
        transform: Sequence[float],
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> 'TextFragment':
        """Create from a text item carrying [a, b, c, d, e, f]"""
        if len(transform) != 6:
            raise ValueError(f"transform needs 6 elements, got {len(transform)}")
        return cls(
            content=content,
            x=float(transform[4]),
            y=float(transform[5]),
            font_height=float(transform[3]) if transform[3] else None,
            width=width,
            height=height,
        )

    @classmethod
    def from_pdfplumber(cls, word: Dict[str, Any], page_height: float) -> 'TextFragment':
        """
        Create from a pdfplumber word dictionary.
        pdfplumber measures `top`/`bottom` downward from the page top,
        so the bottom edge is flipped to an upward y.
        """
        x0 = word.get('x0', 0)
        x1 = word.get('x1', x0)
        top = word.get('top', 0)
        bottom = word.get('bottom', top)
        return cls(
            content=word.get('text', ''),
            x=float(x0),
            y=float(page_height - bottom),
            font_height=word.get('size'),
            width=float(x1 - x0),
            height=float(bottom - top),
        )


@dataclass(frozen=True)
class Line:
    """
    Fragments judged to sit on one visual baseline.

    Attributes:
        fragments: Members, ordered by x
        y: y of the first member placed in the line
        font_height: font height of the first member placed in the line
    """
    fragments: Tuple[TextFragment, ...]
    y: float
    font_height: Optional[float] = None

    @property
    def text(self) -> str:
        """Member contents joined with a single space"""
        return ' '.join(f.content for f in self.fragments)


# ============================================================
# Errors
# ============================================================

class DocumentUnreadableError(Exception):
    """
    The extraction layer could not produce fragments for a document
    (corrupted file, encryption, unsupported content).
    No partial text accompanies this error.
    """

    def __init__(self, source: str, reason: str = ""):
        self.source = source
        self.reason = reason
        message = f"Document unreadable: {source}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
