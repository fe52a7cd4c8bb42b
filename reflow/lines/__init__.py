"""
Lines Module
============
Vertical clustering of fragments into visual lines.
"""

from .clusterer import (
    ClusterConfig, cluster_lines, reading_order, Y_LINE_EPS, LINE_GROUP_EPS
)

__all__ = [
    'ClusterConfig', 'cluster_lines', 'reading_order',
    'Y_LINE_EPS', 'LINE_GROUP_EPS',
]
