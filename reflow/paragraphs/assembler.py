"""
Paragraph Assembler
===================
Joins lines into page text. A vertical gap noticeably larger than one
line height (about 1.8x in typeset documents) marks a paragraph boundary.
Best-effort reconstruction, not lossless layout recovery.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..types import Line, DEFAULT_FONT_HEIGHT, is_usable_height


PARAGRAPH_FACTOR = 1.8


@dataclass
class AssemblyConfig:
    """Configuration for paragraph assembly"""
    paragraph_factor: float = PARAGRAPH_FACTOR
    default_font_height: float = DEFAULT_FONT_HEIGHT
    line_separator: str = "\n"
    paragraph_separator: str = "\n\n"


def _reference_height(line: Line, cfg: AssemblyConfig) -> float:
    if is_usable_height(line.font_height):
        return line.font_height
    return cfg.default_font_height


def is_paragraph_break(prev: Line, curr: Line, cfg: AssemblyConfig) -> bool:
    """Strictly greater than the threshold; equality stays in the paragraph"""
    gap = prev.y - curr.y
    return gap > _reference_height(prev, cfg) * cfg.paragraph_factor


def assemble_page_text(
    lines: Sequence[Line],
    config: Optional[AssemblyConfig] = None
) -> str:
    """
    Build page text from ordered lines.

    Args:
        lines: Lines ordered top-to-bottom
        config: Assembly configuration

    Returns:
        Page text, or "" when there are no lines
    """
    cfg = config or AssemblyConfig()
    parts: List[str] = []

    for i, line in enumerate(lines):
        if i > 0:
            if is_paragraph_break(lines[i - 1], line, cfg):
                parts.append(cfg.paragraph_separator)
            else:
                parts.append(cfg.line_separator)
        parts.append(line.text)

    return ''.join(parts)


def count_paragraph_breaks(
    lines: Sequence[Line],
    config: Optional[AssemblyConfig] = None
) -> int:
    """Number of paragraph boundaries assemble_page_text would insert"""
    cfg = config or AssemblyConfig()
    return sum(
        1 for prev, curr in zip(lines, lines[1:])
        if is_paragraph_break(prev, curr, cfg)
    )
