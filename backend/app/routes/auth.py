"""Request authentication.

The sidebar obtains a Google OAuth access token from its host and forwards it
as a bearer token. The token is passed through to the Docs API untouched.
"""

from fastapi import Depends, Header, HTTPException

from app.services.docs.client import DocsService


def get_access_token(authorization: str | None = Header(default=None)) -> str:
    """Extract the bearer token from the Authorization header."""
    if not authorization:
        raise HTTPException(status_code=401, detail="Not authenticated")

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    return token


def get_docs_service(access_token: str = Depends(get_access_token)) -> DocsService:
    """Docs API service acting as the caller."""
    return DocsService(access_token)
