"""Google Docs API service for document retrieval."""

import logging

import httpx

from app.config import settings
from app.exceptions import DocumentAccessError

logger = logging.getLogger(__name__)

# Module-level HTTP client for connection reuse
_http_client: httpx.AsyncClient | None = None


def _get_http_client() -> httpx.AsyncClient:
    """Get shared HTTP client for connection reuse."""
    global _http_client
    if _http_client is None:
        _http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    return _http_client


async def close_client() -> None:
    """Close the shared HTTP client (called on application shutdown)."""
    global _http_client
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None


class DocsService:
    """Service for reading documents from the Google Docs API."""

    def __init__(self, access_token: str, api_base: str | None = None):
        self.access_token = access_token
        self.api_base = api_base or settings.docs_api_base
        self.headers = {"Authorization": f"Bearer {access_token}"}

    async def get_document(
        self,
        document_id: str,
        include_tabs_content: bool = True,
        fields: str | None = None,
    ) -> dict:
        """Fetch a document, optionally with the content of every tab.

        The API only returns ``tabs`` when ``include_tabs_content`` is set. Pass
        ``fields`` (a partial-response mask such as ``tabs.tabProperties``) to
        keep the response small when the content itself is not needed.

        Raises:
            DocumentAccessError: if the request fails, the API returns an error
                status, or the response body is not JSON
        """
        params = {"includeTabsContent": "true" if include_tabs_content else "false"}
        if fields:
            params["fields"] = fields

        client = _get_http_client()
        try:
            response = await client.get(
                f"{self.api_base}/documents/{document_id}",
                headers=self.headers,
                params=params,
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Docs API returned {e.response.status_code} for document {document_id}",
                extra={"document_id": document_id, "status_code": e.response.status_code},
            )
            raise DocumentAccessError(
                f"Docs API returned {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning(
                f"Docs API request failed for document {document_id}: {e}",
                extra={"document_id": document_id},
            )
            raise DocumentAccessError(str(e) or type(e).__name__) from e
        except ValueError as e:
            logger.warning(
                f"Docs API returned a non-JSON body for document {document_id}",
                extra={"document_id": document_id},
            )
            raise DocumentAccessError("Docs API returned an invalid response") from e
