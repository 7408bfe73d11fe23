"""Hierarchy-aware glossary parser.

Turns a flat sequence of styled blocks into named entries. Headings define the
category path, blank lines separate entries, and a line starting with ``_`` ends
property collection for the current entry. Content is treated as free text: lines
that do not fit the expected shape are ignored rather than reported.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from app.services.metadata.models import CATEGORY_SEPARATOR, Block, Entry

logger = logging.getLogger(__name__)

STOP_MARKER = "_"
PROPERTY_SEPARATOR = ":"
CHILD_LIST_PREFIX = "Entries: "


@dataclass
class _ParseState:
    """Mutable state for a single parse call."""

    entries: dict[str, Entry] = field(default_factory=dict)
    buffer: list[Block] = field(default_factory=list)
    heading_stack: list[str] = field(default_factory=list)
    current_path: str = ""

    def full_path(self) -> str:
        return CATEGORY_SEPARATOR.join(self.heading_stack)

    def flush(self) -> None:
        if self.buffer:
            _commit_entry(self.entries, self.buffer, self.current_path)
            self.buffer = []


def _is_description(block: Block) -> bool:
    return PROPERTY_SEPARATOR not in block.text and not block.text.startswith(STOP_MARKER)


def _split_property(line: str) -> tuple[str, str] | None:
    """Split ``key: value`` on the first separator. Returns None if either side is empty."""
    if PROPERTY_SEPARATOR not in line:
        return None
    key, value = line.split(PROPERTY_SEPARATOR, 1)
    key, value = key.strip(), value.strip()
    if not key or not value:
        return None
    return key, value


def _commit_entry(entries: dict[str, Entry], buffer: Sequence[Block], category: str) -> None:
    """Convert buffered blocks into at most one entry."""
    start = 0
    while start < len(buffer) and buffer[start].is_blank:
        start += 1
    lines = buffer[start:]
    if not lines:
        return

    name = lines[0].text
    description = ""
    if len(lines) > 1 and _is_description(lines[1]):
        description = lines[1].text

    image_url = lines[0].image_url
    if not image_url and description:
        image_url = lines[1].image_url

    properties: dict[str, str] = {}
    for block in lines[2 if description else 1 :]:
        if block.text.startswith(STOP_MARKER):
            break
        if not image_url and block.image_url:
            image_url = block.image_url
        pair = _split_property(block.text)
        if pair:
            properties[pair[0]] = pair[1]

    if not name:
        return

    entries[name] = Entry(
        description=description,
        properties=properties,
        category=category,
        image_url=image_url,
    )


def parse_blocks(blocks: Iterable[Block]) -> dict[str, Entry]:
    """Parse blocks into entries keyed by name.

    A heading is both a category for what follows it and an entry of its own,
    described by the lines directly beneath it. Later entries with the same name
    replace earlier ones.

    Args:
        blocks: Normalized blocks in document order

    Returns:
        Mapping of entry name to Entry, in the order entries were first committed
    """
    state = _ParseState()

    for block in blocks:
        level = block.heading_level

        if level is not None:
            state.flush()
            state.current_path = CATEGORY_SEPARATOR.join(state.heading_stack[: level - 1])
            state.buffer.append(block)
            # Deeper headings do not survive a shallower one.
            del state.heading_stack[level - 1 :]
            state.heading_stack.extend([""] * (level - 1 - len(state.heading_stack)))
            state.heading_stack.append(block.text)

        elif block.is_blank:
            state.flush()
            state.current_path = state.full_path()

        else:
            if not state.buffer:
                state.current_path = state.full_path()
            state.buffer.append(block)

    state.flush()
    return state.entries


def backfill_descriptions(entries: dict[str, Entry]) -> dict[str, Entry]:
    """Describe entries that have no description by listing their direct children.

    A child is an entry whose category is exactly the parent's category extended
    by the parent's name. Grandchildren are not listed. Entries that already have
    a description are left alone, so running this twice changes nothing.

    Mutates and returns ``entries``.
    """
    for parent_name, parent in entries.items():
        if parent.description.strip():
            continue

        if parent.category:
            child_category = parent.category + CATEGORY_SEPARATOR + parent_name
        else:
            child_category = parent_name

        children = [name for name, entry in entries.items() if entry.category == child_category]
        if children:
            parent.description = CHILD_LIST_PREFIX + ", ".join(children)

    return entries


def parse_metadata(blocks: Iterable[Block]) -> dict[str, Entry]:
    """Parse blocks and backfill empty descriptions from child entries."""
    entries = backfill_descriptions(parse_blocks(blocks))
    logger.debug("Parsed %d metadata entries", len(entries))
    return entries
