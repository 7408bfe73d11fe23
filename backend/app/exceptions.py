"""Exception taxonomy for document retrieval errors.

The parsing and context algorithms never raise on document content. These errors
belong to the layer that talks to the Google Docs API and are converted into
structured ``{"error": message}`` results by the metadata service.
"""


class DocumentError(Exception):
    """Base class for document retrieval errors."""

    pass


class DocumentAccessError(DocumentError):
    """The Docs API could not be reached or rejected the request.

    Examples: expired access token, document not shared, network timeout.
    """

    pass


class SectionNotFoundError(DocumentError):
    """The requested tab does not exist in the document."""

    def __init__(self, tab_name: str):
        self.tab_name = tab_name
        super().__init__(f"Tab named '{tab_name}' not found.")
