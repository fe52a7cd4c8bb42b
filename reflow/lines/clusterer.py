"""
Line Clusterer
==============
Groups normalized fragments into visual lines, top-to-bottom,
then left-to-right inside each line.

Tolerances are in the page's native units (points for PDF), not pixels.
"""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import List, Optional, Sequence

from ..types import TextFragment, Line


Y_LINE_EPS = 5.0       # y difference treated as a tie in the reading-order sort
LINE_GROUP_EPS = 6.0   # max distance from a line's anchor y to join that line


@dataclass
class ClusterConfig:
    """Configuration for line clustering"""
    y_line_epsilon: float = Y_LINE_EPS
    line_group_epsilon: float = LINE_GROUP_EPS


def reading_order(
    fragments: Sequence[TextFragment],
    y_line_epsilon: float = Y_LINE_EPS
) -> List[TextFragment]:
    """
    Sort by y descending; near-equal y (within epsilon) falls back to x ascending.
    The comparator is not transitive, but sorting it is deterministic.
    """
    def compare(a: TextFragment, b: TextFragment) -> int:
        if abs(a.y - b.y) < y_line_epsilon:
            dx = a.x - b.x
            return (dx > 0) - (dx < 0)
        dy = b.y - a.y
        return (dy > 0) - (dy < 0)

    return sorted(fragments, key=cmp_to_key(compare))


def _close_line(members: List[TextFragment]) -> Line:
    first = members[0]
    return Line(
        fragments=tuple(sorted(members, key=lambda f: f.x)),
        y=first.y,
        font_height=first.font_height,
    )


def cluster_lines(
    fragments: Sequence[TextFragment],
    config: Optional[ClusterConfig] = None
) -> List[Line]:
    """
    Group fragments into lines.

    Membership is measured against the line's first fragment, not the
    most recent one, so a slow drift in y cannot chain into one line.
    A difference of exactly line_group_epsilon starts a new line.

    Args:
        fragments: Normalized fragments for one page
        config: Clustering configuration

    Returns:
        Lines ordered top-to-bottom, fragments ordered by x
    """
    cfg = config or ClusterConfig()
    lines: List[Line] = []
    current: List[TextFragment] = []
    current_y = 0.0

    for frag in reading_order(fragments, cfg.y_line_epsilon):
        if not current:
            current = [frag]
            current_y = frag.y
        elif abs(frag.y - current_y) < cfg.line_group_epsilon:
            current.append(frag)
        else:
            lines.append(_close_line(current))
            current = [frag]
            current_y = frag.y

    if current:
        lines.append(_close_line(current))

    return lines
