"""Virtual wx list control rendering a :class:`ListSource`."""

from __future__ import annotations

from contextlib import suppress

import wx

from ..controller import ListController
from ..core.model import TableCoordinate
from ..core.source import ListSource
from ..log import logger
from .layout import (
    ACCESSORY_COLUMN,
    DETAIL_COLUMN,
    TITLE_COLUMN,
    DisplayEntry,
    EntryKind,
    entry_text,
    flatten,
)


class SectionedListCtrl(wx.ListCtrl):
    """Report-mode virtual list that draws sections, headers and footers.

    The control only caches the flattened layout. Text is pulled from the
    source on demand, so a paint scheduled against an older layout is
    answered by the source's stale coordinate handling.
    """

    def __init__(
        self,
        parent: wx.Window,
        source: ListSource,
        *,
        column_title: str = "Title",
        detail_column_title: str = "Detail",
    ) -> None:
        super().__init__(parent, style=wx.LC_REPORT | wx.LC_VIRTUAL | wx.LC_SINGLE_SEL)
        self.source = source
        self._entries: list[DisplayEntry] = []
        self.InsertColumn(TITLE_COLUMN, column_title)
        self.InsertColumn(DETAIL_COLUMN, detail_column_title)
        self.InsertColumn(ACCESSORY_COLUMN, "")
        self._section_attr = wx.ItemAttr()
        font = self.GetFont()
        if font.IsOk():
            self._section_attr.SetFont(font.Bold())
        self.Bind(wx.EVT_LIST_ITEM_RIGHT_CLICK, self._on_item_right_click)
        source.attach(self)

    # RenderingSurface ------------------------------------------------
    def reload_data(self) -> None:
        self._entries = flatten(self.source)
        self.SetItemCount(len(self._entries))
        self.Refresh()

    # virtual list callbacks ------------------------------------------
    def entry_at(self, index: int) -> DisplayEntry | None:
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def OnGetItemText(self, item: int, column: int) -> str:  # noqa: N802 - wx API
        entry = self.entry_at(item)
        if entry is None:
            return ""
        return entry_text(self.source, entry, column)

    def OnGetItemAttr(self, item: int) -> wx.ItemAttr | None:  # noqa: N802 - wx API
        entry = self.entry_at(item)
        if entry is None or entry.kind is EntryKind.ROW:
            return None
        return self._section_attr

    # selection and editing -------------------------------------------
    def selected_coordinate(self) -> TableCoordinate | None:
        """Return the coordinate of the selected row, ignoring headers and footers."""
        index = self.GetFirstSelected()
        entry = self.entry_at(index)
        if entry is None or entry.kind is not EntryKind.ROW:
            return None
        return entry.coordinate

    def _on_item_right_click(self, event: wx.ListEvent) -> None:
        entry = self.entry_at(event.GetIndex())
        if entry is None or entry.kind is not EntryKind.ROW:
            return
        if not self.source.can_edit_row(entry.section, entry.row):
            return
        row = self.source.row_at(entry.section, entry.row)
        if row is None or not row.edit_actions:
            return
        menu = wx.Menu()
        for action in row.edit_actions:
            item = menu.Append(wx.ID_ANY, action.title)
            self.Bind(
                wx.EVT_MENU,
                lambda _evt, a=action, c=entry.coordinate: self._trigger(a, c),
                item,
            )
        self.PopupMenu(menu)
        menu.Destroy()

    def _trigger(self, action, coordinate: TableCoordinate) -> None:
        logger.debug("Edit action %r at %s", action.title, coordinate)
        action.trigger(coordinate)


def bind_lifecycle(window: wx.Window, controller: ListController) -> None:
    """Refresh on show and clear on hide of *window*."""

    def _on_show(event: wx.ShowEvent) -> None:
        shown = False
        with suppress(Exception):
            shown = bool(event.IsShown())
        if shown:
            controller.will_appear()
        else:
            controller.will_disappear()
        event.Skip()

    window.Bind(wx.EVT_SHOW, _on_show)
