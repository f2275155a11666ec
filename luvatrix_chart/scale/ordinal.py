from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Generic, Hashable, TypeVar

from luvatrix_chart.errors import ChartConfigError
from luvatrix_chart.scale.base import Scale

R = TypeVar("R")


@dataclass(frozen=True)
class OrdinalScale(Scale[Hashable], Generic[R]):
    """Discrete-to-discrete lookup, e.g. series key to palette color.

    A range shorter than the domain cycles; values outside the domain map to
    `unknown`.
    """

    domain: tuple[Hashable, ...] = ()
    range: tuple[R, ...] = ()
    unknown: R | None = None
    _index: dict[Hashable, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        domain = tuple(self.domain)
        index: dict[Hashable, int] = {}
        for i, value in enumerate(domain):
            try:
                # First occurrence wins.
                index.setdefault(value, i)
            except TypeError as exc:
                raise ChartConfigError(f"ordinal categories must be hashable: {value!r}") from exc
        object.__setattr__(self, "domain", domain)
        object.__setattr__(self, "range", tuple(self.range))
        object.__setattr__(self, "_index", index)

    def get(self, value: Hashable) -> R | None:
        try:
            index = self._index.get(value)
        except TypeError:
            return self.unknown
        if index is None:
            return self.unknown
        if not self.range:
            return None
        return self.range[index % len(self.range)]

    def tick(self, value: Hashable) -> Any:
        return self.get(value)

    def with_unknown(self, unknown: R) -> "OrdinalScale[R]":
        return replace(self, unknown=unknown)
