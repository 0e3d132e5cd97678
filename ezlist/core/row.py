"""Rows displayed inside a section."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Generic, Protocol, TypeVar

from .fields import FieldSource, Frozen, Live, resolve
from .model import CellAccessory, CellStyle, EditAction, derive_cell_style

T = TypeVar("T")

BINDABLE_FIELDS: tuple[str, ...] = (
    "title",
    "subtitle",
    "accessory",
    "edit_actions",
    "reuse_identifier",
)


class RowLike(Protocol):
    """Capability interface consumed by :class:`~ezlist.core.source.ListSource`."""

    image: Any | None
    cell_style: CellStyle

    @property
    def title(self) -> str | None: ...

    @property
    def subtitle(self) -> str | None: ...

    @property
    def accessory(self) -> CellAccessory: ...

    @property
    def edit_actions(self) -> tuple[EditAction, ...]: ...

    @property
    def reuse_identifier(self) -> str | None: ...


class Row(Generic[T]):
    """A list entry whose fields are either frozen or computed from ``item``.

    A row built with plain values is static: every read returns exactly what
    was passed in. :meth:`bound` (or :meth:`bind`) attaches accessors that are
    evaluated against ``item`` on each read, falling back to the value
    captured at construction when an accessor yields ``None``.

    ``cell_style`` is decided once, from the construction-time title and
    subtitle, and is not re-derived from live values.
    """

    def __init__(
        self,
        title: str | None = None,
        subtitle: str | None = None,
        *,
        item: T | None = None,
        accessory: CellAccessory | None = None,
        cell_style: CellStyle | None = None,
        reuse_identifier: str | None = None,
        edit_actions: Sequence[EditAction] | None = None,
        image: Any | None = None,
    ) -> None:
        self.item = item
        self.image = image
        self._created: dict[str, Any] = {
            "title": title,
            "subtitle": subtitle,
            "accessory": accessory or CellAccessory.NONE,
            "edit_actions": tuple(edit_actions or ()),
            "reuse_identifier": reuse_identifier,
        }
        self._slots: dict[str, FieldSource] = {
            name: Frozen(value) for name, value in self._created.items()
        }
        self.cell_style = (
            cell_style if cell_style is not None else derive_cell_style(title, subtitle)
        )

    @classmethod
    def bound(
        cls,
        item: T,
        title: Callable[[T], str | None],
        subtitle: Callable[[T], str | None] | None = None,
        *,
        accessory: Callable[[T], CellAccessory | None] | None = None,
        cell_style: CellStyle | None = None,
        reuse_identifier: Callable[[T], str | None] | None = None,
        edit_actions: Callable[[T], Sequence[EditAction] | None] | None = None,
        image: Any | None = None,
    ) -> Row[T]:
        """Build a row whose fields track *item* through the given accessors.

        Every accessor except ``edit_actions`` is evaluated once to capture
        the fallback snapshot; ``edit_actions`` falls back to no actions.
        """
        row = cls(
            title(item),
            subtitle(item) if subtitle is not None else None,
            item=item,
            accessory=accessory(item) if accessory is not None else None,
            cell_style=cell_style,
            reuse_identifier=(
                reuse_identifier(item) if reuse_identifier is not None else None
            ),
            image=image,
        )
        accessors = {
            "title": title,
            "subtitle": subtitle,
            "accessory": accessory,
            "reuse_identifier": reuse_identifier,
            "edit_actions": edit_actions,
        }
        for name, accessor in accessors.items():
            if accessor is not None:
                row.bind(name, accessor)
        return row

    # binding ---------------------------------------------------------
    def bind(self, field: str, accessor: Callable[[T], Any] | None) -> None:
        """Recompute *field* from ``item`` via *accessor* on every read.

        Passing ``None`` drops the accessor and restores the construction-time
        value.
        """
        if field not in BINDABLE_FIELDS:
            raise ValueError(f"Unknown row field: {field}")
        created = self._created[field]
        if accessor is None:
            self._slots[field] = Frozen(created)
        else:
            self._slots[field] = Live(accessor, created)

    def is_live(self, field: str) -> bool:
        """Return ``True`` when *field* is currently computed by an accessor."""
        return isinstance(self._slots[field], Live)

    def _read(self, field: str) -> Any:
        return resolve(self._slots[field], self.item)

    # fields ----------------------------------------------------------
    @property
    def title(self) -> str | None:
        return self._read("title")

    @property
    def subtitle(self) -> str | None:
        return self._read("subtitle")

    @property
    def accessory(self) -> CellAccessory:
        return self._read("accessory") or CellAccessory.NONE

    @accessory.setter
    def accessory(self, value: CellAccessory) -> None:
        self._slots["accessory"] = Frozen(value)

    @property
    def edit_actions(self) -> tuple[EditAction, ...]:
        return tuple(self._read("edit_actions") or ())

    @edit_actions.setter
    def edit_actions(self, value: Sequence[EditAction] | None) -> None:
        self._slots["edit_actions"] = Frozen(tuple(value or ()))

    @property
    def reuse_identifier(self) -> str | None:
        return self._read("reuse_identifier")

    @reuse_identifier.setter
    def reuse_identifier(self, value: str | None) -> None:
        self._slots["reuse_identifier"] = Frozen(value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(title={self.title!r}, "
            f"subtitle={self.subtitle!r}, cell_style={self.cell_style.value})"
        )
