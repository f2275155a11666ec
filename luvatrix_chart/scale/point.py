from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Sequence

from luvatrix_chart.config import DEFAULT_CHART_DEFAULTS, ChartDefaults
from luvatrix_chart.scale.band import BandLayout, DiscreteScale


@dataclass(frozen=True)
class PointScale(DiscreteScale):
    """Band scale with zero-width bands: categories map to evenly spaced points.

    With `padding=0` the first and last categories land on the range ends; a
    single category lands on the range center.
    """

    domain: tuple[Hashable, ...]
    range: tuple[float, float]
    padding: float = DEFAULT_CHART_DEFAULTS.padding_outer
    align: float = DEFAULT_CHART_DEFAULTS.align
    round: bool = False
    _index: dict[Hashable, int] = field(init=False, repr=False, compare=False)
    _layout: BandLayout = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        n = len(self.domain)
        self._init_layout(
            cells=n - 1 + 2.0 * self.padding,
            inner=1.0,
            outer=self.padding,
            align=self.align,
            round_=self.round,
        )

    @classmethod
    def from_defaults(
        cls,
        domain: Sequence[Hashable],
        range: tuple[float, float],
        defaults: ChartDefaults = DEFAULT_CHART_DEFAULTS,
        *,
        round: bool = False,
    ) -> "PointScale":
        """Point scale padded by the defaults' outer padding."""
        return cls(tuple(domain), range, padding=defaults.padding_outer, align=defaults.align, round=round)
