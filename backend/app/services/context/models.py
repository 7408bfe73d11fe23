"""Data models for cursor context lookup."""

from dataclasses import dataclass, field
from enum import StrEnum


class ElementType(StrEnum):
    """Kind of document element, as reported by the editor."""

    PARAGRAPH = "PARAGRAPH"
    LIST_ITEM = "LIST_ITEM"
    TEXT = "TEXT"
    TABLE = "TABLE"
    TABLE_OF_CONTENTS = "TABLE_OF_CONTENTS"
    UNSUPPORTED = "UNSUPPORTED"


# Element kinds that act as block containers and expose their text.
CONTAINER_TYPES = frozenset({ElementType.PARAGRAPH, ElementType.LIST_ITEM})


@dataclass(frozen=True)
class ContextBlock:
    """A body-level element. Siblings are its neighbours in the block sequence."""

    text: str
    element_type: ElementType = ElementType.PARAGRAPH

    @property
    def readable_text(self) -> str:
        """Text of paragraphs and list items; other element kinds read as empty."""
        if self.element_type in CONTAINER_TYPES:
            return self.text
        return ""


@dataclass(frozen=True)
class RangeElement:
    """One element of a selection.

    ``block_index`` points at the enclosing paragraph or list item, or is None
    when the element is not inside one.
    """

    block_index: int | None
    element_type: ElementType = ElementType.TEXT
    text: str = ""


@dataclass(frozen=True)
class Cursor:
    """A single insertion point inside the block at ``block_index``."""

    block_index: int | None


@dataclass(frozen=True)
class Selection:
    elements: list[RangeElement] = field(default_factory=list)


@dataclass(frozen=True)
class Position:
    """Where the user is. A selection wins over a cursor when both are present."""

    cursor: Cursor | None = None
    selection: Selection | None = None
