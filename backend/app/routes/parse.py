"""Stateless endpoints operating on caller-supplied content."""

from fastapi import APIRouter, Request, Response

from app.middleware import rate_limit_parse
from app.schemas import ContextRequest, ContextResponse, ParseRequest
from app.services.context.window import extract_context
from app.services.docs.normalizer import blocks_from_html
from app.services.metadata.parser import parse_metadata
from app.services.metadata.service import serialize_entries

router = APIRouter()


@router.post("/metadata/parse")
@rate_limit_parse()
async def parse_metadata_blocks(request: Request, response: Response, body: ParseRequest):
    """Parse blocks (or a Google Docs HTML export) into glossary entries."""
    if body.html is not None:
        blocks = blocks_from_html(body.html)
    else:
        blocks = [b.to_block() for b in body.blocks]

    return {"items": serialize_entries(parse_metadata(blocks))}


@router.post("/context", response_model=ContextResponse)
@rate_limit_parse()
async def context_window(request: Request, response: Response, body: ContextRequest):
    """Return the text window around a position in caller-supplied blocks."""
    blocks = [b.to_block() for b in body.blocks]
    return ContextResponse(context=extract_context(blocks, body.to_position(), body.lookaround))
