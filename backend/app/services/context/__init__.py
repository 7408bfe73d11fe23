"""Cursor context lookup."""

from app.services.context.models import (
    ContextBlock,
    Cursor,
    ElementType,
    Position,
    RangeElement,
    Selection,
)
from app.services.context.window import CONTEXT_SAFETY_LIMIT, extract_context

__all__ = [
    "CONTEXT_SAFETY_LIMIT",
    "ContextBlock",
    "Cursor",
    "ElementType",
    "Position",
    "RangeElement",
    "Selection",
    "extract_context",
]
