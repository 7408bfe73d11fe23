"""Google Docs retrieval and block normalization."""

from app.services.docs.client import DocsService, close_client
from app.services.docs.normalizer import (
    HtmlBlockExtractor,
    blocks_from_content,
    blocks_from_html,
    context_blocks_from_content,
)

__all__ = [
    "DocsService",
    "HtmlBlockExtractor",
    "blocks_from_content",
    "blocks_from_html",
    "close_client",
    "context_blocks_from_content",
]
