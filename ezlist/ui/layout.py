"""Toolkit-neutral layout of a list source as a flat sequence of display lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.model import CellAccessory, TableCoordinate, is_blank
from ..core.source import ListSource

TITLE_COLUMN = 0
DETAIL_COLUMN = 1
ACCESSORY_COLUMN = 2

ACCESSORY_GLYPHS: dict[CellAccessory, str] = {
    CellAccessory.NONE: "",
    CellAccessory.DISCLOSURE_INDICATOR: "›",
    CellAccessory.CHECKMARK: "✓",
    CellAccessory.DETAIL_BUTTON: "ⓘ",
    CellAccessory.DETAIL_DISCLOSURE_BUTTON: "ⓘ ›",
}


class EntryKind(str, Enum):
    """Enumerate kinds of display lines."""

    HEADER = "header"
    ROW = "row"
    FOOTER = "footer"


@dataclass(frozen=True)
class DisplayEntry:
    """One line of the flattened list; ``row`` is ``-1`` for headers and footers."""

    kind: EntryKind
    section: int
    row: int = -1

    @property
    def coordinate(self) -> TableCoordinate:
        return TableCoordinate(self.section, self.row)


def flatten(source: ListSource) -> list[DisplayEntry]:
    """Lay out the current sections of *source* top to bottom.

    Headers and footers get a line only when their title has text.
    """
    entries: list[DisplayEntry] = []
    for section in range(source.section_count()):
        if not is_blank(source.header_title(section)):
            entries.append(DisplayEntry(EntryKind.HEADER, section))
        entries.extend(
            DisplayEntry(EntryKind.ROW, section, row)
            for row in range(source.row_count(section))
        )
        if not is_blank(source.footer_title(section)):
            entries.append(DisplayEntry(EntryKind.FOOTER, section))
    return entries


def entry_text(source: ListSource, entry: DisplayEntry, column: int) -> str:
    """Return the text shown for *entry* in *column*.

    *entry* may come from a layout computed before the sections changed; rows
    then resolve to the placeholder cell and headers to an empty line.
    """
    if entry.kind is EntryKind.ROW:
        cell = source.cell_content(entry.section, entry.row)
        if column == TITLE_COLUMN:
            return cell.text or ""
        if column == DETAIL_COLUMN:
            return cell.detail_text or ""
        if column == ACCESSORY_COLUMN:
            return ACCESSORY_GLYPHS.get(cell.accessory, "")
        return ""
    if column != TITLE_COLUMN or entry.section >= source.section_count():
        return ""
    if entry.kind is EntryKind.HEADER:
        return source.header_title(entry.section) or ""
    return source.footer_title(entry.section) or ""
