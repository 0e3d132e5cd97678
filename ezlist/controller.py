"""Bind a :class:`ListSource` to view appearance lifecycle events."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .core.source import CanEditRowPredicate, ListSource, SectionFactory
from .settings import SourceSettings

logger = logging.getLogger(__name__)


class ListController:
    """Refresh the list when its view appears and clear it when it disappears.

    :meth:`prepare` must run before the view is first shown, typically where
    the host window builds its widgets.
    """

    def __init__(self) -> None:
        self.source: ListSource | None = None
        self.refresh_sections_and_reload: Callable[[], None] | None = None
        self.clear_sections: Callable[[], None] | None = None

    @classmethod
    def for_sections(
        cls,
        construct_sections: SectionFactory | None,
        *,
        can_edit_row: CanEditRowPredicate | None = None,
        settings: SourceSettings | None = None,
    ) -> ListController:
        """Return a prepared controller around a default :class:`ListSource`."""
        controller = cls()
        controller.prepare(
            ListSource(
                construct_sections,
                can_edit_row=can_edit_row,
                settings=settings,
            )
        )
        return controller

    def prepare(self, source: ListSource) -> None:
        self.source = source
        self.refresh_sections_and_reload = source.refresh
        self.clear_sections = source.clear

    def will_appear(self) -> None:
        if self.refresh_sections_and_reload is None:
            raise RuntimeError("ListController.prepare() must be called before the view appears")
        self.refresh_sections_and_reload()

    def will_disappear(self) -> None:
        if self.clear_sections is None:
            raise RuntimeError("ListController.prepare() must be called before the view disappears")
        logger.debug("Clearing sections on disappear")
        self.clear_sections()
