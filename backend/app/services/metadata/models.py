"""Data models for glossary metadata parsing."""

import re
from dataclasses import dataclass, field

NORMAL_TEXT = "NORMAL_TEXT"

HEADING_PATTERN = re.compile(r"^HEADING_([1-6])$")

CATEGORY_SEPARATOR = " > "


@dataclass(frozen=True)
class Block:
    """One normalized line of document content."""

    text: str
    style: str = NORMAL_TEXT
    image_url: str | None = None

    @property
    def heading_level(self) -> int | None:
        """Heading level 1-6, or None for body text."""
        match = HEADING_PATTERN.match(self.style)
        if match:
            return int(match.group(1))
        return None

    @property
    def is_blank(self) -> bool:
        """A blank block has no text and no image. It separates entries."""
        return self.text == "" and not self.image_url


@dataclass
class Entry:
    """A parsed glossary record, keyed by name in the result mapping."""

    description: str = ""
    properties: dict[str, str] = field(default_factory=dict)
    category: str = ""
    image_url: str | None = None

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "properties": dict(self.properties),
            "category": self.category,
            "imageUrl": self.image_url,
        }
