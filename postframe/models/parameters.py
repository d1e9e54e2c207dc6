"""Generation, takeoff and pricing configuration."""

from __future__ import annotations
from typing import Literal
from pydantic import BaseModel

DEFAULT_ENDWALL_POST_CLEARANCE = 1.0


class GenerationConfig(BaseModel):
    """Controls which rules run and how layout edge cases are treated."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
    endwall_post_clearance: float = DEFAULT_ENDWALL_POST_CLEARANCE  # Added to post thickness; endwall posts closer than this to a sidewall post are skipped
    strict_openings: bool = False        # Raise instead of warn on out-of-bounds openings


class TakeoffConfig(BaseModel):
    """Controls how the frame is turned into purchasable quantities."""
    strategy: Literal["geometry", "parametric"] = "geometry"
    waste_factor: float = 1.10           # Applied to linear trades and sheeting
    concrete_waste_factor: float = 1.05
    stock_length: float = 16.0           # Feet per lumber/trim piece
    panel_coverage: float = 48.0         # Square feet covered per sheeting panel (3' x 16')


class PricingConfig(BaseModel):
    """Square-foot budget constants used for a quick price alongside the BOM."""
    base_unit_cost: float = 78.50        # $ per square foot of footprint
    height_cost: float = 1650.0          # $ per foot of eave height
