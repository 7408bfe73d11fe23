"""Normalize Google Docs content into blocks.

Two sources are supported: the Docs API ``body.content`` structure (with inline
and positioned image objects) and the HTML produced by a Drive export.
"""

from bs4 import BeautifulSoup, Tag

from app.services.context.models import ContextBlock, ElementType
from app.services.metadata.models import NORMAL_TEXT, Block


def _image_uri(obj: dict | None, properties_key: str) -> str | None:
    """Resolve ``<properties_key>.embeddedObject.imageProperties.contentUri``."""
    if not obj:
        return None
    embedded = (obj.get(properties_key) or {}).get("embeddedObject") or {}
    image_properties = embedded.get("imageProperties")
    if not image_properties:
        return None
    return image_properties.get("contentUri")


def _paragraph_image(
    paragraph: dict,
    inline_objects: dict,
    positioned_objects: dict,
) -> str | None:
    """First inline image wins, then the first anchored (positioned) image."""
    for element in paragraph.get("elements", []):
        inline = element.get("inlineObjectElement")
        if inline:
            uri = _image_uri(
                inline_objects.get(inline.get("inlineObjectId")), "inlineObjectProperties"
            )
            if uri:
                return uri

    for object_id in paragraph.get("positionedObjectIds", []):
        uri = _image_uri(positioned_objects.get(object_id), "positionedObjectProperties")
        if uri:
            return uri

    return None


def _paragraph_text(paragraph: dict) -> str:
    return "".join(
        element["textRun"].get("content", "")
        for element in paragraph.get("elements", [])
        if element.get("textRun")
    )


def blocks_from_content(
    content: list[dict] | None,
    inline_objects: dict | None = None,
    positioned_objects: dict | None = None,
) -> list[Block]:
    """
    Convert Docs API structural elements into metadata blocks.

    Only paragraphs produce blocks; tables, section breaks and tables of
    contents are skipped.

    Args:
        content: ``body.content`` from a Docs API document or tab
        inline_objects: ``inlineObjects`` map for resolving inline images
        positioned_objects: ``positionedObjects`` map for anchored images

    Returns:
        Blocks in document order
    """
    inline_objects = inline_objects or {}
    positioned_objects = positioned_objects or {}
    blocks: list[Block] = []

    for element in content or []:
        paragraph = element.get("paragraph")
        if not paragraph:
            continue

        style = (paragraph.get("paragraphStyle") or {}).get("namedStyleType") or NORMAL_TEXT
        blocks.append(
            Block(
                text=_paragraph_text(paragraph).strip(),
                style=style,
                image_url=_paragraph_image(paragraph, inline_objects, positioned_objects),
            )
        )

    return blocks


def context_blocks_from_content(content: list[dict] | None) -> list[ContextBlock]:
    """Convert Docs API structural elements into body-level context blocks."""
    blocks: list[ContextBlock] = []

    for element in content or []:
        if "paragraph" in element:
            paragraph = element["paragraph"]
            element_type = ElementType.LIST_ITEM if "bullet" in paragraph else ElementType.PARAGRAPH
            # The editor reports paragraph text without its trailing newline.
            text = _paragraph_text(paragraph).rstrip("\n")
            blocks.append(ContextBlock(text=text, element_type=element_type))
        elif "table" in element:
            blocks.append(ContextBlock(text="", element_type=ElementType.TABLE))
        elif "tableOfContents" in element:
            blocks.append(ContextBlock(text="", element_type=ElementType.TABLE_OF_CONTENTS))

    return blocks


class HtmlBlockExtractor:
    """Extract metadata blocks from a Google Docs HTML export."""

    HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
    TEXT_TAGS = {"p", "li"}

    def extract(self, html_content: str) -> list[Block]:
        """
        Parse an HTML export into blocks.

        Empty paragraphs are kept because they separate entries.

        Args:
            html_content: HTML string from a Google Docs export

        Returns:
            Blocks in document order
        """
        soup = BeautifulSoup(html_content, "lxml")
        body = soup.find("body")
        if not body:
            return []

        blocks: list[Block] = []
        for element in body.descendants:
            if not isinstance(element, Tag):
                continue

            tag_name = element.name.lower() if element.name else ""

            if tag_name in self.HEADING_TAGS:
                style = f"HEADING_{tag_name[1]}"
            elif tag_name in self.TEXT_TAGS:
                if element.find_parent(self.HEADING_TAGS):
                    continue
                style = NORMAL_TEXT
            else:
                continue

            blocks.append(
                Block(
                    text=element.get_text().strip(),
                    style=style,
                    image_url=self._extract_image(element),
                )
            )

        return blocks

    def _extract_image(self, element: Tag) -> str | None:
        """Return the first image source inside the element."""
        img = element.find("img", src=True)
        if img:
            return img["src"]
        return None


def blocks_from_html(html_content: str) -> list[Block]:
    """Convert a Google Docs HTML export into metadata blocks."""
    return HtmlBlockExtractor().extract(html_content)
