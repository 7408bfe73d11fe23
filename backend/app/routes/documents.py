"""Endpoints that read a Google Doc on behalf of the caller."""

from fastapi import APIRouter, Depends, HTTPException

from app.exceptions import DocumentAccessError, SectionNotFoundError
from app.routes.auth import get_docs_service
from app.schemas import (
    ContextResponse,
    DocumentContextRequest,
    TabListResponse,
)
from app.services.context.service import get_document_context
from app.services.docs.client import DocsService
from app.services.metadata.service import get_metadata_content, get_tab_list

router = APIRouter()


@router.get("/{document_id}/tabs", response_model=TabListResponse)
async def list_tabs(document_id: str, docs: DocsService = Depends(get_docs_service)):
    """List the document's tabs so the user can pick the glossary tab."""
    return {"tabs": await get_tab_list(docs, document_id)}


@router.get("/{document_id}/metadata")
async def get_metadata(
    document_id: str,
    tab: str | None = None,
    docs: DocsService = Depends(get_docs_service),
):
    """Parse the glossary tab into entries.

    Failures to read the document are reported as ``{"error": ...}``.
    """
    return await get_metadata_content(docs, document_id, tab)


@router.post("/{document_id}/context", response_model=ContextResponse)
async def get_context(
    document_id: str,
    request: DocumentContextRequest,
    docs: DocsService = Depends(get_docs_service),
):
    """Return the text around the user's cursor or selection."""
    try:
        context = await get_document_context(
            docs, document_id, request.to_position(), request.lookaround, request.tab
        )
    except SectionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from None
    except DocumentAccessError as e:
        raise HTTPException(status_code=502, detail=f"Error accessing document: {e}") from e

    return ContextResponse(context=context)
