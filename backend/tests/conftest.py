"""Shared fixtures: Docs API document builders and a mocked Docs service."""

import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

# Override settings before importing app modules
os.environ["RATE_LIMIT_ENABLED"] = "false"


def text_run(content: str) -> dict:
    return {"textRun": {"content": content}}


def paragraph(
    text: str = "",
    style: str = "NORMAL_TEXT",
    inline_object_id: str | None = None,
    positioned_object_ids: list[str] | None = None,
    bullet: bool = False,
) -> dict:
    """Build a Docs API paragraph structural element (text gets its trailing newline)."""
    elements = []
    if inline_object_id:
        elements.append({"inlineObjectElement": {"inlineObjectId": inline_object_id}})
    elements.append(text_run(text + "\n"))
    para = {"elements": elements, "paragraphStyle": {"namedStyleType": style}}
    if positioned_object_ids:
        para["positionedObjectIds"] = positioned_object_ids
    if bullet:
        para["bullet"] = {"listId": "kix.list1"}
    return {"paragraph": para}


def inline_image(uri: str) -> dict:
    return {
        "inlineObjectProperties": {"embeddedObject": {"imageProperties": {"contentUri": uri}}}
    }


def positioned_image(uri: str) -> dict:
    return {
        "positionedObjectProperties": {"embeddedObject": {"imageProperties": {"contentUri": uri}}}
    }


def tab(title: str, content: list[dict], **document_tab) -> dict:
    return {
        "tabProperties": {"tabId": f"t.{title.lower()}", "title": title},
        "documentTab": {"body": {"content": content}, **document_tab},
    }


@pytest.fixture
def glossary_content() -> list[dict]:
    """A small glossary: one category with two characters and a nested place."""
    return [
        paragraph("Characters", "HEADING_1"),
        paragraph(""),
        paragraph("Gandalf"),
        paragraph("A wandering wizard"),
        paragraph("Color: grey"),
        paragraph(""),
        paragraph("Frodo", inline_object_id="img.frodo"),
        paragraph("Ring-bearer"),
        paragraph("Home: Bag End, Hobbiton"),
        paragraph("_notes"),
        paragraph("Secret: never listed"),
        paragraph("Places", "HEADING_1"),
        paragraph("Rivendell", "HEADING_2"),
        paragraph("Last Homely House"),
    ]


@pytest.fixture
def tabbed_document(glossary_content) -> dict:
    return {
        "documentId": "doc-123",
        "title": "Novel",
        "tabs": [
            tab("Draft", [paragraph("Gandalf arrived."), paragraph("He was late.")]),
            tab(
                "Metadata",
                glossary_content,
                inlineObjects={"img.frodo": inline_image("https://images.example/frodo.png")},
            ),
        ],
    }


@pytest.fixture
def mock_docs():
    """Docs service whose get_document is an AsyncMock."""
    docs = MagicMock()
    docs.get_document = AsyncMock()
    return docs


@pytest.fixture
def patch_get_document():
    """Patch DocsService.get_document for route tests."""
    with patch(
        "app.services.docs.client.DocsService.get_document", new_callable=AsyncMock
    ) as mock_get:
        yield mock_get


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": "Bearer test-access-token"}
