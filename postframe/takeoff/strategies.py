"""Takeoff strategy lookup."""

from __future__ import annotations

from postframe.takeoff.base import QuantityTakeoff
from postframe.takeoff.geometry import GeometryTakeoff
from postframe.takeoff.parametric import ParametricTakeoff
from postframe.models import TakeoffConfig

STRATEGIES: dict[str, type[QuantityTakeoff]] = {
    "geometry": GeometryTakeoff,
    "parametric": ParametricTakeoff,
}


def create_takeoff(config: TakeoffConfig | None = None) -> QuantityTakeoff:
    """Build the strategy named by ``config.strategy``."""
    config = config or TakeoffConfig()
    try:
        cls = STRATEGIES[config.strategy]
    except KeyError:
        raise ValueError(
            f"Unknown takeoff strategy {config.strategy!r}; available: {', '.join(STRATEGIES)}"
        ) from None
    return cls(config)
