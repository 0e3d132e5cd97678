from __future__ import annotations

import logging

import pytest

from ezlist.core.model import (
    CellAccessory,
    CellDescriptor,
    CellStyle,
    EditAction,
    TableCoordinate,
)
from ezlist.core.row import Row
from ezlist.core.section import Section
from ezlist.core.source import (
    STALE_COORDINATE_EVENT,
    ListSource,
    LoggingDiagnosticSink,
    StaleCoordinate,
    StaleCoordinateError,
    apply_default_style,
)
from ezlist.settings import SourceSettings


class _RecordingSink:
    def __init__(self) -> None:
        self.events: list[StaleCoordinate] = []

    def record(self, event: StaleCoordinate) -> None:
        self.events.append(event)


class _RecordingSurface:
    def __init__(self, source: ListSource | None = None) -> None:
        self.reloads = 0
        self.seen_counts: list[int] = []
        self.source = source

    def reload_data(self) -> None:
        self.reloads += 1
        if self.source is not None:
            self.seen_counts.append(self.source.section_count())


def _source(sections, **kwargs) -> tuple[ListSource, _RecordingSink]:
    sink = _RecordingSink()
    source = ListSource(lambda: sections, diagnostics=sink, **kwargs)
    source.refresh()
    return source, sink


def test_structural_queries_reflect_sections() -> None:
    source, _ = _source(
        [
            Section("A", "end", [Row("one"), Row("two")]),
            Section(None, None, []),
        ]
    )

    assert source.section_count() == 2
    assert source.row_count(0) == 2
    assert source.row_count(1) == 0
    assert source.header_title(0) == "A"
    assert source.footer_title(0) == "end"
    assert source.header_title(1) is None


@pytest.mark.parametrize(
    ("section", "row"),
    [(0, 2), (1, 0), (-1, 0), (0, -1), (5, 5)],
)
def test_row_at_returns_none_out_of_range(section: int, row: int) -> None:
    source, _ = _source([Section(rows=[Row("one"), Row("two")])])

    assert source.row_at(section, row) is None


def test_row_at_returns_row_in_range() -> None:
    second = Row("two")
    source, _ = _source([Section(rows=[Row("one"), second])])

    assert source.row_at(0, 1) is second


def test_section_queries_raise_for_invalid_index() -> None:
    source, _ = _source([Section("A")])

    with pytest.raises(IndexError):
        source.row_count(1)
    with pytest.raises(IndexError):
        source.header_title(-1)


def test_refresh_replaces_sections() -> None:
    generations = [
        [Section(rows=[Row("old")]) for _ in range(5)],
        [
            Section(rows=[Row("a")]),
            Section(rows=[Row("b"), Row("c")]),
            Section(rows=[]),
        ],
    ]
    source = ListSource(lambda: generations.pop(0))

    source.refresh()
    assert source.section_count() == 5
    source.refresh()

    assert source.section_count() == 3
    assert [source.row_count(i) for i in range(3)] == [1, 2, 0]


def test_refresh_without_callback_yields_no_sections() -> None:
    source = ListSource()
    source.refresh()
    assert source.section_count() == 0


def test_refresh_callback_returning_none_yields_no_sections() -> None:
    source = ListSource(lambda: None)
    source.refresh()
    assert source.section_count() == 0


def test_refresh_signals_surface_after_rebuild() -> None:
    source = ListSource(lambda: [Section(), Section()])
    surface = _RecordingSurface(source)
    source.attach(surface)

    source.refresh()

    assert surface.reloads == 1
    assert surface.seen_counts == [2]


def test_clear_empties_sections() -> None:
    source, _ = _source([Section(rows=[Row("a")]) for _ in range(4)])

    source.clear()

    assert source.section_count() == 0
    assert source.sections == ()
    assert source.row_at(0, 0) is None


def test_construct_sections_can_be_overridden() -> None:
    class _Source(ListSource):
        def construct_sections(self):
            return [Section("from subclass")]

    source = _Source()
    source.refresh()

    assert source.header_title(0) == "from subclass"


def test_cell_content_populates_subtitle_cells() -> None:
    image = object()
    row = Row(
        "Title",
        "Sub",
        accessory=CellAccessory.DISCLOSURE_INDICATOR,
        reuse_identifier="contact",
        image=image,
    )
    source, _ = _source([Section(rows=[row])])

    cell = source.cell_content(0, 0)

    assert cell.text == "Title"
    assert cell.detail_text == "Sub"
    assert cell.accessory is CellAccessory.DISCLOSURE_INDICATOR
    assert cell.image is image
    assert cell.reuse_identifier == "contact"
    assert not cell.is_placeholder


def test_cell_content_skips_subtitle_for_default_style() -> None:
    row = Row("Title", "Sub", cell_style=CellStyle.DEFAULT)
    source, _ = _source([Section(rows=[row])])

    cell = source.cell_content(0, 0)

    assert cell.text == "Title"
    assert cell.detail_text is None
    assert cell.image is None
    assert cell.reuse_identifier == "cell"


def test_blank_reuse_identifier_uses_configured_default() -> None:
    row = Row("Title", reuse_identifier="  ")
    source, _ = _source(
        [Section(rows=[row])],
        settings=SourceSettings(default_reuse_identifier="row"),
    )

    assert source.cell_content(0, 0).reuse_identifier == "row"


def test_stale_cell_query_returns_placeholder_and_records() -> None:
    source, sink = _source([Section(rows=[Row("a")])])
    source.clear()

    cell = source.cell_content(0, 0)

    assert cell.is_placeholder
    assert cell.text is None
    assert sink.events == [StaleCoordinate("cell_content", 0, 0, 0)]
    assert "0(section), 0(row)" in sink.events[0].message
    assert "section count: 0" in sink.events[0].message


def test_stale_edit_query_returns_false_and_records() -> None:
    source, sink = _source(
        [Section(rows=[Row("a", edit_actions=[EditAction("Delete")])])],
        can_edit_row=lambda coordinate: True,
    )

    assert source.can_edit_row(0, 3) is False
    assert sink.events == [StaleCoordinate("can_edit_row", 0, 3, 1)]


def test_debug_assertions_raise_after_recording() -> None:
    source, sink = _source(
        [Section(rows=[Row("a")])],
        settings=SourceSettings(debug_assertions=True),
    )

    with pytest.raises(StaleCoordinateError) as excinfo:
        source.cell_content(2, 0)

    assert isinstance(excinfo.value, AssertionError)
    assert excinfo.value.event.section == 2
    assert len(sink.events) == 1


def test_row_actions_override_table_predicate() -> None:
    editable = Row("a", edit_actions=[EditAction("Delete")])
    source, _ = _source(
        [Section(rows=[editable, Row("b")])],
        can_edit_row=lambda coordinate: False,
    )

    assert source.can_edit_row(0, 0) is True
    assert source.can_edit_row(0, 1) is False


def test_rows_without_actions_defer_to_predicate() -> None:
    seen: list[TableCoordinate] = []

    def _predicate(coordinate: TableCoordinate) -> bool:
        seen.append(coordinate)
        return coordinate.row == 1

    source, _ = _source(
        [Section(rows=[Row("a"), Row("b")])],
        can_edit_row=_predicate,
    )

    assert source.can_edit_row(0, 0) is False
    assert source.can_edit_row(0, 1) is True
    assert seen == [TableCoordinate(0, 0), TableCoordinate(0, 1)]


def test_no_predicate_means_not_editable() -> None:
    source, _ = _source([Section(rows=[Row("a")])])

    assert source.can_edit_row(0, 0) is False


def test_logging_sink_emits_structured_warning(caplog: pytest.LogCaptureFixture) -> None:
    source = ListSource(lambda: [Section()], diagnostics=LoggingDiagnosticSink())
    source.refresh()

    with caplog.at_level(logging.WARNING, logger="ezlist"):
        source.cell_content(0, 7)

    records = [r for r in caplog.records if r.getMessage() == STALE_COORDINATE_EVENT]
    assert len(records) == 1
    payload = records[0].json["payload"]
    assert payload["section"] == 0
    assert payload["row"] == 7
    assert payload["section_count"] == 1
    assert payload["operation"] == "cell_content"


def test_apply_default_style_is_pure_on_cell() -> None:
    row = Row("Title", "Sub")
    cell = CellDescriptor(reuse_identifier="x")

    result = apply_default_style(cell, row)

    assert result is cell
    assert (cell.text, cell.detail_text, cell.reuse_identifier) == ("Title", "Sub", "x")
    assert row.title == "Title"
