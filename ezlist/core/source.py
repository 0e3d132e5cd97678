"""List source answering structural queries for a sectioned list surface.

The rendering surface may ask for a coordinate that was valid when it was
captured but no longer exists, because :meth:`ListSource.refresh` or
:meth:`ListSource.clear` shrank the sections in between (a redraw scheduled
against the old layout). Row-addressed queries therefore bounds-check before
indexing: a stale coordinate is recorded through a :class:`DiagnosticSink`
and resolves to a safe default (a placeholder cell, a non-editable row). With
``debug_assertions`` enabled the source additionally raises
:class:`StaleCoordinateError` so the race surfaces during development.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

from ..settings import SourceSettings
from ..telemetry import log_event
from .builders import is_out_of_range
from .model import CellDescriptor, CellStyle, TableCoordinate, is_blank
from .row import RowLike
from .section import Section

logger = logging.getLogger(__name__)

STALE_COORDINATE_EVENT = "STALE_COORDINATE"


@dataclass(frozen=True)
class StaleCoordinate:
    """Describe a row query that addressed a coordinate outside the sections."""

    operation: str
    section: int
    row: int
    section_count: int

    @property
    def message(self) -> str:
        return (
            "Race condition with the rendering surface likely: coordinate was "
            f"out of range. Current section count: {self.section_count} - "
            f"coordinate: {self.section}(section), {self.row}(row)"
        )


class StaleCoordinateError(AssertionError):
    """Raised for stale coordinates when debug assertions are enabled."""

    def __init__(self, event: StaleCoordinate) -> None:
        super().__init__(event.message)
        self.event = event


class DiagnosticSink(Protocol):
    """Receiver for stale coordinate diagnostics."""

    def record(self, event: StaleCoordinate) -> None: ...


class LoggingDiagnosticSink:
    """Emit stale coordinate diagnostics as structured log events."""

    def __init__(self, level: int = logging.WARNING) -> None:
        self.level = level

    def record(self, event: StaleCoordinate) -> None:
        log_event(
            STALE_COORDINATE_EVENT,
            {
                "operation": event.operation,
                "section": event.section,
                "row": event.row,
                "section_count": event.section_count,
                "message": event.message,
            },
            level=self.level,
        )


class RenderingSurface(Protocol):
    """Surface that draws the list and can be told to redraw everything."""

    def reload_data(self) -> None: ...


SectionFactory = Callable[[], Iterable[Section] | None]
CanEditRowPredicate = Callable[[TableCoordinate], bool]


def apply_default_style(cell: CellDescriptor, row: RowLike) -> CellDescriptor:
    """Populate *cell* from *row* and return it.

    The detail text is only filled for ``SUBTITLE`` rows; an image is only
    copied when the row carries one.
    """
    cell.text = row.title
    if row.cell_style is CellStyle.SUBTITLE:
        cell.detail_text = row.subtitle
    cell.accessory = row.accessory
    image = getattr(row, "image", None)
    if image is not None:
        cell.image = image
    return cell


class ListSource:
    """Own the displayed sections and answer queries about them."""

    def __init__(
        self,
        construct_sections: SectionFactory | None = None,
        *,
        can_edit_row: CanEditRowPredicate | None = None,
        surface: RenderingSurface | None = None,
        diagnostics: DiagnosticSink | None = None,
        settings: SourceSettings | None = None,
    ) -> None:
        self.settings = settings or SourceSettings()
        self._construct_sections = construct_sections
        self.can_edit_row_predicate = can_edit_row
        self.surface = surface
        self.diagnostics: DiagnosticSink = diagnostics or LoggingDiagnosticSink(
            self.settings.diagnostics_level
        )
        self._sections: list[Section] = []

    # lifecycle -------------------------------------------------------
    def attach(self, surface: RenderingSurface | None) -> None:
        """Set the surface signalled at the end of :meth:`refresh`."""
        self.surface = surface

    def construct_sections(self) -> Iterable[Section]:
        """Return freshly built sections; no callback means no sections."""
        if self._construct_sections is None:
            return ()
        return self._construct_sections() or ()

    def refresh(self) -> None:
        """Replace every section with a newly constructed set and redraw."""
        self.clear()
        self._sections.extend(self.construct_sections())
        logger.debug("Refreshed list source with %d sections", len(self._sections))
        if self.surface is not None:
            self.surface.reload_data()

    def clear(self) -> None:
        """Drop all sections.

        Subclasses that hook per-row subscriptions while building sections
        release them here.
        """
        self._sections.clear()

    @property
    def sections(self) -> tuple[Section, ...]:
        """Snapshot of the current sections."""
        return tuple(self._sections)

    # structural queries ----------------------------------------------
    def section_count(self) -> int:
        return len(self._sections)

    def _section(self, index: int) -> Section:
        if index < 0 or index >= len(self._sections):
            raise IndexError(
                f"section index {index} out of range for {len(self._sections)} sections"
            )
        return self._sections[index]

    def row_count(self, section: int) -> int:
        return len(self._section(section))

    def header_title(self, section: int) -> str | None:
        return self._section(section).header_title

    def footer_title(self, section: int) -> str | None:
        return self._section(section).footer_title

    def row_at(self, section: int, row: int) -> RowLike | None:
        """Return the row at the coordinate or ``None`` when it does not exist."""
        coordinate = TableCoordinate(section, row)
        if is_out_of_range(coordinate, self._sections):
            return None
        return self._sections[section][row]

    def _resolve_row(self, operation: str, section: int, row: int) -> RowLike | None:
        found = self.row_at(section, row)
        if found is None:
            event = StaleCoordinate(operation, section, row, len(self._sections))
            self.diagnostics.record(event)
            if self.settings.debug_assertions:
                raise StaleCoordinateError(event)
        return found

    # cells -----------------------------------------------------------
    def reuse_identifier_for(self, row: RowLike) -> str:
        identifier = row.reuse_identifier
        if is_blank(identifier):
            return self.settings.default_reuse_identifier
        return identifier

    def dequeue_cell(self, row: RowLike) -> CellDescriptor:
        """Return a blank cell for *row*; override to hand out recycled cells."""
        return CellDescriptor(reuse_identifier=self.reuse_identifier_for(row))

    def apply_default_style(self, cell: CellDescriptor, row: RowLike) -> CellDescriptor:
        return apply_default_style(cell, row)

    def cell_content(self, section: int, row: int) -> CellDescriptor:
        """Describe the cell at the coordinate, or a placeholder when stale."""
        found = self._resolve_row("cell_content", section, row)
        if found is None:
            return CellDescriptor.placeholder()
        return self.apply_default_style(self.dequeue_cell(found), found)

    def can_edit_row(self, section: int, row: int) -> bool:
        """Return whether the row accepts editing.

        Rows offering edit actions are always editable; otherwise the
        list-wide predicate decides, and without one nothing is editable.
        """
        found = self._resolve_row("can_edit_row", section, row)
        if found is None:
            return False
        if found.edit_actions:
            return True
        if self.can_edit_row_predicate is None:
            return False
        return bool(self.can_edit_row_predicate(TableCoordinate(section, row)))
