"""Value types shared by rows, sections and list sources."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

DEFAULT_REUSE_IDENTIFIER = "cell"


class CellStyle(str, Enum):
    """Enumerate supported cell layouts."""

    DEFAULT = "default"
    SUBTITLE = "subtitle"


class CellAccessory(str, Enum):
    """Enumerate decorations drawn at the trailing edge of a cell."""

    NONE = "none"
    DISCLOSURE_INDICATOR = "disclosure_indicator"
    CHECKMARK = "checkmark"
    DETAIL_BUTTON = "detail_button"
    DETAIL_DISCLOSURE_BUTTON = "detail_disclosure_button"


class EditActionStyle(str, Enum):
    """Enumerate visual styles of a row edit action."""

    NORMAL = "normal"
    DESTRUCTIVE = "destructive"


class TableCoordinate(NamedTuple):
    """Position of a row inside a sectioned list."""

    section: int
    row: int


@dataclass(frozen=True)
class EditAction:
    """Represent a swipe/edit action offered on a row."""

    title: str
    style: EditActionStyle = EditActionStyle.NORMAL
    handler: Callable[[TableCoordinate], Any] | None = None

    def trigger(self, coordinate: TableCoordinate) -> None:
        """Invoke the handler for *coordinate*; a missing handler does nothing."""
        if self.handler is not None:
            self.handler(coordinate)


@dataclass
class CellDescriptor:
    """Renderer-facing description of a single cell."""

    text: str | None = None
    detail_text: str | None = None
    accessory: CellAccessory = CellAccessory.NONE
    image: Any | None = None
    reuse_identifier: str | None = None
    is_placeholder: bool = False

    @classmethod
    def placeholder(cls) -> CellDescriptor:
        """Return the blank cell handed out for coordinates that no longer exist."""
        return cls(is_placeholder=True)


def is_blank(value: str | None) -> bool:
    """Return ``True`` when *value* is ``None`` or whitespace only."""
    return value is None or not value.strip()


def derive_cell_style(title: str | None, subtitle: str | None) -> CellStyle:
    """Pick ``SUBTITLE`` only when both *title* and *subtitle* carry text."""
    if is_blank(title) or is_blank(subtitle):
        return CellStyle.DEFAULT
    return CellStyle.SUBTITLE
