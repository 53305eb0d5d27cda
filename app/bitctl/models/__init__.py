"""Data models for bitctl.

This module exports the core data structures used throughout the application.
"""

from bitctl.models.component import ComponentKind, ComponentRecord
from bitctl.models.search import (
    ActionDirective,
    ActionOutcome,
    ClassifiedTerms,
    ControlFlag,
    KindResult,
    SearchOptions,
    SearchTerm,
    TermType,
)

__all__ = [
    "ActionDirective",
    "ActionOutcome",
    "ClassifiedTerms",
    "ComponentKind",
    "ComponentRecord",
    "ControlFlag",
    "KindResult",
    "SearchOptions",
    "SearchTerm",
    "TermType",
]
