"""
Paragraphs Module
=================
Line joining with paragraph boundary detection.
"""

from .assembler import (
    AssemblyConfig, assemble_page_text, count_paragraph_breaks,
    is_paragraph_break, PARAGRAPH_FACTOR
)

__all__ = [
    'AssemblyConfig', 'assemble_page_text', 'count_paragraph_breaks',
    'is_paragraph_break', 'PARAGRAPH_FACTOR',
]
