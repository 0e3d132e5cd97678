"""Fluent helpers for decorating rows while building sections."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from .model import CellAccessory, EditAction, TableCoordinate
from .row import Row, RowLike
from .section import Section

R = TypeVar("R", bound=RowLike)
T = TypeVar("T")


def with_image(row: R, image: Any) -> R:
    """Attach *image* to *row* and return the row."""
    row.image = image
    return row


def with_accessory(row: R, accessory: CellAccessory) -> R:
    """Pin *accessory* on *row* and return the row."""
    row.accessory = accessory
    return row


def with_reuse_identifier(
    row: Row[T], identifier: str | Callable[[T], str | None] | None
) -> Row[T]:
    """Pin a reuse identifier, or bind it to an accessor when *identifier* is callable."""
    if callable(identifier):
        row.bind("reuse_identifier", identifier)
    else:
        row.reuse_identifier = identifier
    return row


def with_edit_actions(row: R, actions: Sequence[EditAction] | None) -> R:
    """Pin *actions* as the edit actions of *row* and return the row."""
    row.edit_actions = actions
    return row


def is_out_of_range(coordinate: TableCoordinate, sections: Sequence[Section]) -> bool:
    """Return ``True`` when *coordinate* does not address a row in *sections*."""
    section, row = coordinate
    if section < 0 or section >= len(sections):
        return True
    return row < 0 or row >= len(sections[section])
