"""Directory entry views.

This module provides the EntrySet pipeline together with the criteria
and order keys it accepts.
"""

from dirview.entries.entry_set import EntrySet
from dirview.entries.models import (
    Criterion,
    ItemFilter,
    OrderBy,
    PipelineStep,
    StepAction,
    TextFilter,
    TextFilterBy,
    VisibilityFilter,
)

__all__ = [
    "Criterion",
    "EntrySet",
    "ItemFilter",
    "OrderBy",
    "PipelineStep",
    "StepAction",
    "TextFilter",
    "TextFilterBy",
    "VisibilityFilter",
]
