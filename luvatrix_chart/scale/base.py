from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Sequence, TypeVar

T = TypeVar("T")


class Scale(ABC, Generic[T]):
    """Maps domain values to pixel positions and pixel positions back to indices."""

    @abstractmethod
    def tick(self, value: T) -> Any:
        """Position of `value`, or `None` when the scale cannot represent it."""
        raise NotImplementedError

    def least_index(self, tick: float) -> int:
        """Domain index rendered closest to `tick`; 0 where that is meaningless."""
        return 0

    def least_index_with_domain(self, tick: float, domain: Sequence[T]) -> tuple[int, float]:
        """Like `least_index`, plus the offset of `tick` from the matched position."""
        return (0, 0.0)
