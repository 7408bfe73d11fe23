"""Glossary metadata parsing."""

from app.services.metadata.models import Block, Entry
from app.services.metadata.parser import backfill_descriptions, parse_blocks, parse_metadata

__all__ = [
    "Block",
    "Entry",
    "backfill_descriptions",
    "parse_blocks",
    "parse_metadata",
]
