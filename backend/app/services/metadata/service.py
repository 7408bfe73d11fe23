"""Glossary metadata retrieval for a Google Doc."""

import logging

from app.config import settings
from app.exceptions import DocumentAccessError, SectionNotFoundError
from app.services.docs.client import DocsService
from app.services.docs.normalizer import blocks_from_content
from app.services.docs.sections import get_section, list_tab_titles
from app.services.metadata.models import Entry
from app.services.metadata.parser import parse_metadata

logger = logging.getLogger(__name__)

# Tabs are only returned with includeTabsContent; the mask drops their bodies.
TAB_LIST_FIELDS = "tabs.tabProperties.title"


def serialize_entries(entries: dict[str, Entry]) -> dict[str, dict]:
    return {name: entry.to_dict() for name, entry in entries.items()}


async def get_metadata_content(
    docs: DocsService,
    document_id: str,
    tab_name: str | None = None,
) -> dict:
    """
    Parse the glossary tab of a document.

    Args:
        docs: Docs API service for the current user
        document_id: Google Docs document ID
        tab_name: Tab holding the glossary (defaults to ``settings.default_metadata_tab``)

    Returns:
        ``{"items": {...}}`` on success, ``{"error": message}`` if the document
        cannot be read or the tab does not exist
    """
    target_tab = tab_name or settings.default_metadata_tab

    try:
        document = await docs.get_document(document_id, include_tabs_content=True)
    except DocumentAccessError as e:
        return {"error": f"Error accessing tab: {e}"}

    try:
        section = get_section(document, target_tab)
    except SectionNotFoundError as e:
        logger.info(
            f"Metadata tab not found: {target_tab}",
            extra={"document_id": document_id, "tab_name": target_tab},
        )
        return {"error": str(e)}

    blocks = blocks_from_content(
        section.content, section.inline_objects, section.positioned_objects
    )
    entries = parse_metadata(blocks)
    logger.info(
        f"Parsed {len(entries)} entries from {len(blocks)} blocks",
        extra={"document_id": document_id, "tab_name": target_tab},
    )
    return {"items": serialize_entries(entries)}


async def get_tab_list(docs: DocsService, document_id: str) -> list[dict]:
    """List tab titles for the tab picker. Returns [] if the document cannot be read."""
    try:
        document = await docs.get_document(
            document_id, include_tabs_content=True, fields=TAB_LIST_FIELDS
        )
    except DocumentAccessError:
        return []
    return [{"title": title} for title in list_tab_titles(document)]
