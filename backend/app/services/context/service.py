"""Cursor context lookup for a Google Doc."""

import logging

from app.services.context.models import Position
from app.services.context.window import extract_context
from app.services.docs.client import DocsService
from app.services.docs.normalizer import context_blocks_from_content
from app.services.docs.sections import get_section

logger = logging.getLogger(__name__)


async def get_document_context(
    docs: DocsService,
    document_id: str,
    position: Position,
    lookaround: int = 0,
    tab_name: str | None = None,
) -> str:
    """Fetch a document and return the text window around ``position``.

    Raises:
        DocumentAccessError: if the document cannot be read
        SectionNotFoundError: if ``tab_name`` does not exist
    """
    document = await docs.get_document(document_id, include_tabs_content=True)
    section = get_section(document, tab_name)
    blocks = context_blocks_from_content(section.content)
    logger.debug(f"Extracting context from {len(blocks)} blocks (lookaround={lookaround})")
    return extract_context(blocks, position, lookaround)
