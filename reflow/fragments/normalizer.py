"""
Fragment Normalizer
===================
Drops whitespace-only fragments and fills in missing font heights.
"""

from dataclasses import dataclass, replace
from typing import List, Iterable, Optional

from ..types import TextFragment, DEFAULT_FONT_HEIGHT, is_usable_height


@dataclass
class NormalizerConfig:
    """Configuration for fragment normalization"""
    default_font_height: float = DEFAULT_FONT_HEIGHT


def normalize_fragments(
    fragments: Iterable[TextFragment],
    config: Optional[NormalizerConfig] = None
) -> List[TextFragment]:
    """
    Keep fragments with visible text; content is NOT trimmed.

    Args:
        fragments: Raw fragments for one page, any order
        config: Normalizer configuration

    Returns:
        Surviving fragments in input order, each with a usable font_height
    """
    cfg = config or NormalizerConfig()
    kept: List[TextFragment] = []

    for frag in fragments:
        if frag.is_blank:
            continue
        if not is_usable_height(frag.font_height):
            frag = replace(frag, font_height=cfg.default_font_height)
        kept.append(frag)

    return kept
