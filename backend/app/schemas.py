"""Request and response models shared by the API routes."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.config import settings
from app.services.context.models import (
    ContextBlock,
    Cursor,
    ElementType,
    Position,
    RangeElement,
    Selection,
)
from app.services.metadata.models import NORMAL_TEXT, Block


class BlockIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str = ""
    style: str = NORMAL_TEXT
    image_url: str | None = Field(default=None, alias="imageUrl")

    def to_block(self) -> Block:
        # Text is trimmed at normalization time, same as document blocks.
        return Block(text=self.text.strip(), style=self.style, image_url=self.image_url or None)


class ContextBlockIn(BaseModel):
    text: str = ""
    element_type: ElementType = ElementType.PARAGRAPH

    def to_block(self) -> ContextBlock:
        return ContextBlock(text=self.text, element_type=self.element_type)


class CursorIn(BaseModel):
    block_index: int | None


class RangeElementIn(BaseModel):
    block_index: int | None
    element_type: ElementType = ElementType.TEXT
    text: str = ""


class SelectionIn(BaseModel):
    elements: list[RangeElementIn] = []


class PositionIn(BaseModel):
    """Cursor or selection. A selection wins when both are sent."""

    cursor: CursorIn | None = None
    selection: SelectionIn | None = None
    lookaround: int = Field(default=settings.default_lookaround, ge=0, le=settings.max_lookaround)

    def to_position(self) -> Position:
        cursor = Cursor(self.cursor.block_index) if self.cursor else None
        selection = None
        if self.selection is not None:
            selection = Selection(
                elements=[
                    RangeElement(e.block_index, e.element_type, e.text)
                    for e in self.selection.elements
                ]
            )
        return Position(cursor=cursor, selection=selection)


class DocumentContextRequest(PositionIn):
    tab: str | None = None


class ContextRequest(PositionIn):
    blocks: list[ContextBlockIn]


class ContextResponse(BaseModel):
    context: str


class ParseRequest(BaseModel):
    blocks: list[BlockIn] | None = None
    html: str | None = None

    @model_validator(mode="after")
    def check_source(self) -> "ParseRequest":
        if (self.blocks is None) == (self.html is None):
            raise ValueError("Provide exactly one of 'blocks' or 'html'")
        return self


class TabOut(BaseModel):
    title: str


class TabListResponse(BaseModel):
    tabs: list[TabOut]
