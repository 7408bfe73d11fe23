"""Locate a document section (tab) in a Docs API response."""

from dataclasses import dataclass, field

from app.exceptions import SectionNotFoundError


@dataclass
class Section:
    """Body content of a tab (or of a single-tab document) plus its image objects."""

    content: list[dict]
    inline_objects: dict = field(default_factory=dict)
    positioned_objects: dict = field(default_factory=dict)


def find_tab(document: dict, title: str) -> dict | None:
    """Return the first top-level tab whose title matches exactly."""
    for tab in document.get("tabs") or []:
        if (tab.get("tabProperties") or {}).get("title") == title:
            return tab
    return None


def list_tab_titles(document: dict) -> list[str]:
    return [(tab.get("tabProperties") or {}).get("title", "") for tab in document.get("tabs") or []]


def _root_section(document: dict) -> Section:
    return Section(
        content=(document.get("body") or {}).get("content") or [],
        inline_objects=document.get("inlineObjects") or {},
        positioned_objects=document.get("positionedObjects") or {},
    )


def _tab_section(tab: dict, root: Section) -> Section:
    # Image objects live on the documentTab; fall back to the root maps.
    document_tab = tab.get("documentTab") or {}
    return Section(
        content=(document_tab.get("body") or {}).get("content") or [],
        inline_objects=document_tab.get("inlineObjects") or root.inline_objects,
        positioned_objects=document_tab.get("positionedObjects") or root.positioned_objects,
    )


def get_section(document: dict, tab_name: str | None) -> Section:
    """
    Resolve the section to read.

    Documents without tabs always resolve to their body. Otherwise ``tab_name``
    selects the tab; when it is None the first tab is used.

    Raises:
        SectionNotFoundError: if the document has tabs and none is titled ``tab_name``
    """
    root = _root_section(document)
    tabs = document.get("tabs")
    if not tabs:
        return root

    if tab_name is None:
        return _tab_section(tabs[0], root)

    tab = find_tab(document, tab_name)
    if tab is None:
        raise SectionNotFoundError(tab_name)
    return _tab_section(tab, root)
