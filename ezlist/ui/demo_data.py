"""Static and live dataset feeding the demo window."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..core.builders import with_accessory, with_edit_actions
from ..core.model import CellAccessory, EditAction, EditActionStyle
from ..core.row import Row
from ..core.section import Section


@dataclass
class Contact:
    """Mutable demo item rendered through bound rows."""

    name: str
    email: str = ""
    favourite: bool = False


_DEMO_CONTACTS: tuple[tuple[str, str, bool], ...] = (
    ("Ada Lovelace", "ada@example.org", True),
    ("Grace Hopper", "grace@example.org", False),
    ("Alan Turing", "", False),
)


def build_demo_contacts() -> list[Contact]:
    return [Contact(name, email, favourite) for name, email, favourite in _DEMO_CONTACTS]


def build_demo_sections(
    contacts: list[Contact], on_change: Callable[[], None] | None = None
) -> list[Section]:
    """Return one static section and one section bound to *contacts*.

    The delete action removes the contact and then calls *on_change*.
    """

    def _remove(coordinate) -> None:
        if 0 <= coordinate.row < len(contacts):
            del contacts[coordinate.row]
        if on_change is not None:
            on_change()

    static = Section(
        "About",
        "Rows in this section never change.",
        [
            Row("Version", "1.0", accessory=CellAccessory.NONE),
            with_accessory(Row("Licence"), CellAccessory.DISCLOSURE_INDICATOR),
        ],
    )
    people = Section.bound(
        lambda: f"Contacts ({len(contacts)})",
        lambda: f"{sum(c.favourite for c in contacts)} favourite(s)",
    )
    for contact in contacts:
        row = Row.bound(
            contact,
            lambda c: c.name,
            lambda c: c.email or None,
            accessory=lambda c: (
                CellAccessory.CHECKMARK if c.favourite else CellAccessory.NONE
            ),
        )
        people.append(
            with_edit_actions(
                row, [EditAction("Delete", EditActionStyle.DESTRUCTIVE, _remove)]
            )
        )
    return [static, people]
