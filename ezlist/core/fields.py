"""Field slots that hold either a frozen snapshot or a live accessor."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class Frozen(Generic[V]):
    """Slot holding a fixed value."""

    value: V


@dataclass(frozen=True)
class Live(Generic[V]):
    """Slot recomputed on every read.

    ``fallback`` is the snapshot captured when the slot was created; it is
    returned whenever the accessor yields ``None``.
    """

    accessor: Callable[..., V | None]
    fallback: V | None = None


FieldSource = Frozen[Any] | Live[Any]


def resolve(source: FieldSource, *args: Any) -> Any:
    """Return the current value of *source*.

    ``args`` are forwarded to a live accessor (the bound item for rows,
    nothing for sections). Exceptions raised by the accessor propagate.
    """
    if isinstance(source, Frozen):
        return source.value
    value = source.accessor(*args)
    return source.fallback if value is None else value
