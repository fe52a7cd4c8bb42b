"""
Fragments Module
================
Input cleanup ahead of line clustering.
"""

from .normalizer import NormalizerConfig, normalize_fragments

__all__ = ['NormalizerConfig', 'normalize_fragments']
