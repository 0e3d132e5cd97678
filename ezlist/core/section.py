"""Sections grouping rows under an optional header and footer."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence
from typing import overload

from .fields import FieldSource, Frozen, Live, resolve
from .row import RowLike


class Section(MutableSequence[RowLike]):
    """Ordered, mutable group of rows.

    Rows keep insertion order and duplicates are allowed. Header and footer
    titles follow the same frozen-or-live rule as row fields: a bound
    accessor wins, and a ``None`` result falls back to the title captured at
    construction.
    """

    def __init__(
        self,
        header_title: str | None = None,
        footer_title: str | None = None,
        rows: Iterable[RowLike] | None = None,
    ) -> None:
        self._rows: list[RowLike] = list(rows or ())
        self._header_created = header_title
        self._footer_created = footer_title
        self._header: FieldSource = Frozen(header_title)
        self._footer: FieldSource = Frozen(footer_title)

    @classmethod
    def bound(
        cls,
        header: Callable[[], str | None],
        footer: Callable[[], str | None] | None = None,
        rows: Iterable[RowLike] | None = None,
    ) -> Section:
        """Build a section whose titles are recomputed on every read."""
        section = cls(header(), footer() if footer is not None else None, rows)
        section.bind_header(header)
        if footer is not None:
            section.bind_footer(footer)
        return section

    # titles ----------------------------------------------------------
    def bind_header(self, accessor: Callable[[], str | None] | None) -> None:
        if accessor is None:
            self._header = Frozen(self._header_created)
        else:
            self._header = Live(accessor, self._header_created)

    def bind_footer(self, accessor: Callable[[], str | None] | None) -> None:
        if accessor is None:
            self._footer = Frozen(self._footer_created)
        else:
            self._footer = Live(accessor, self._footer_created)

    @property
    def header_title(self) -> str | None:
        return resolve(self._header)

    @header_title.setter
    def header_title(self, value: str | None) -> None:
        self._header = Frozen(value)

    @property
    def footer_title(self) -> str | None:
        return resolve(self._footer)

    @footer_title.setter
    def footer_title(self, value: str | None) -> None:
        self._footer = Frozen(value)

    # sequence protocol -----------------------------------------------
    @overload
    def __getitem__(self, index: int) -> RowLike: ...

    @overload
    def __getitem__(self, index: slice) -> list[RowLike]: ...

    def __getitem__(self, index):
        return self._rows[index]

    def __setitem__(self, index, value) -> None:
        self._rows[index] = value

    def __delitem__(self, index) -> None:
        del self._rows[index]

    def __len__(self) -> int:
        return len(self._rows)

    def insert(self, index: int, value: RowLike) -> None:
        self._rows.insert(index, value)

    def __repr__(self) -> str:
        return (
            f"Section(header_title={self.header_title!r}, "
            f"footer_title={self.footer_title!r}, rows={len(self._rows)})"
        )
