"""
Models package for shortcodes

Contains data structures and type definitions for the processing pipeline.
"""

from .state import ProgramState, pipeline
from .shortcodes import ShortcodeSpec, Occurrence, HintKind, Renderer, Span

__all__ = [
    "ProgramState",
    "pipeline",
    "ShortcodeSpec",
    "Occurrence",
    "HintKind",
    "Renderer",
    "Span",
]
