"""Bounded text window around the user's cursor or selection.

Used by term lookup to disambiguate a word using nearby text. Blank neighbours
are skipped without counting against the lookaround limit, so the window stays
dense when the document uses empty paragraphs for spacing.
"""

from collections.abc import Sequence

from app.services.context.models import (
    CONTAINER_TYPES,
    ContextBlock,
    ElementType,
    Position,
)

# Upper bound on sibling steps per direction, independent of the lookaround limit.
CONTEXT_SAFETY_LIMIT = 100


def _container(blocks: Sequence[ContextBlock], index: int | None) -> int | None:
    """Return ``index`` if it names a paragraph or list item in ``blocks``."""
    if index is None or not 0 <= index < len(blocks):
        return None
    if blocks[index].element_type not in CONTAINER_TYPES:
        return None
    return index


def _selection_text(blocks: Sequence[ContextBlock], position: Position) -> str:
    parts = []
    for element in position.selection.elements:
        if element.element_type in CONTAINER_TYPES:
            index = _container(blocks, element.block_index)
            text = blocks[index].text if index is not None else element.text
        elif element.element_type == ElementType.TEXT:
            text = element.text
        else:
            continue
        parts.append(text + " ")
    return "".join(parts)


def _walk(blocks: Sequence[ContextBlock], start: int, step: int, limit: int) -> list[str]:
    """Collect up to ``limit`` non-blank texts walking away from ``start``, nearest first."""
    found: list[str] = []
    index = start
    steps = 0
    while len(found) < limit and steps < CONTEXT_SAFETY_LIMIT:
        index += step
        if not 0 <= index < len(blocks):
            break
        text = blocks[index].readable_text
        if text.strip():
            found.append(text)
        steps += 1
    return found


def extract_context(
    blocks: Sequence[ContextBlock],
    position: Position,
    limit: int = 0,
) -> str:
    """Return the selected or current text plus up to ``limit`` neighbours per side.

    Args:
        blocks: Body-level elements in document order
        position: Cursor or selection; the selection is used when both are given
        limit: Non-blank neighbouring blocks to include before and after

    Returns:
        ``prefix + " " + core + " " + suffix``, or "" if the position is not
        inside a paragraph or list item
    """
    core_text = ""
    start_block = end_block = None

    if position.selection is not None:
        elements = position.selection.elements
        if elements:
            start_block = _container(blocks, elements[0].block_index)
            end_block = _container(blocks, elements[-1].block_index)
        core_text = _selection_text(blocks, position)
    elif position.cursor is not None:
        start_block = _container(blocks, position.cursor.block_index)
        end_block = start_block
        if start_block is not None:
            core_text = blocks[start_block].readable_text

    if start_block is None:
        return ""
    if end_block is None:
        end_block = start_block

    prefix = ""
    for text in _walk(blocks, start_block, -1, limit):
        prefix = text + " " + prefix

    suffix = ""
    for text in _walk(blocks, end_block, 1, limit):
        suffix += " " + text

    return prefix + " " + core_text + " " + suffix
