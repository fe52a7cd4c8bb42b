"""
Text Reflow Engine
==================
Rebuilds readable text (line breaks and paragraph boundaries) from
positioned text fragments, one page at a time.

Architecture:
- fragments: Blank-fragment filtering and font height defaults
- lines: Vertical clustering into visual lines
- paragraphs: Line joining with paragraph gap detection
- pipeline: Per-page driver and document assembly

Usage:
    from reflow import ReflowPipeline
    pipeline = ReflowPipeline()
    text, debug = pipeline.run_from_pages(pages)
"""

from .types import (
    TextFragment,
    Line,
    DocumentUnreadableError,
    DEFAULT_FONT_HEIGHT,
)
from .fragments import NormalizerConfig, normalize_fragments
from .lines import ClusterConfig, cluster_lines, Y_LINE_EPS, LINE_GROUP_EPS
from .paragraphs import AssemblyConfig, assemble_page_text, PARAGRAPH_FACTOR
from .pipeline import (
    ReflowPipeline,
    PipelineConfig,
    DebugBundle,
    PageStats,
    reflow_pages,
    iter_pdf_pages,
    extract_pdf_pages,
    run_reflow_pipeline,
)

__all__ = [
    'TextFragment',
    'Line',
    'DocumentUnreadableError',
    'DEFAULT_FONT_HEIGHT',
    'NormalizerConfig',
    'normalize_fragments',
    'ClusterConfig',
    'cluster_lines',
    'Y_LINE_EPS',
    'LINE_GROUP_EPS',
    'AssemblyConfig',
    'assemble_page_text',
    'PARAGRAPH_FACTOR',
    'ReflowPipeline',
    'PipelineConfig',
    'DebugBundle',
    'PageStats',
    'reflow_pages',
    'iter_pdf_pages',
    'extract_pdf_pages',
    'run_reflow_pipeline',
]

__version__ = '1.0.0'
