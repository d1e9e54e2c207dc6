"""Building context: accumulates state during frame generation."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import DimensionalSpec, WallSide
from .framing import GenerationWarning, StructuralElement
from .parameters import GenerationConfig


class FrameLayout(BaseModel):
    """Derived scalars shared by every rule, computed once by the analyzer."""
    rounded_length: float
    rafter_angle: float
    rafter_run: float                    # Ridge line to bearer face
    eave_run: float                      # Ridge line to rafter tail
    post_line_x: float                   # |x| of sidewall post centers
    end_inset: float                     # Inset of first/last post and truss from the building end
    endwall_post_xs: list[float] = []

    @property
    def half_length(self) -> float:
        return self.rounded_length / 2

    def row_positions(self, spacing: float) -> list[float]:
        """
        Centers (z) of a row of members at ``spacing`` along the rounded length.

        The first and last member are pulled inward by ``end_inset`` so their
        outer faces land on the building line instead of overshooting it.
        """
        bays = int(self.rounded_length / spacing + 1e-9)
        positions: list[float] = []
        for i in range(bays + 1):
            along = i * spacing
            z = along - self.half_length
            if i == 0:
                z += self.end_inset
            if abs(along - self.rounded_length) < 1e-9:
                z -= self.end_inset
            positions.append(z)
        return positions


class BuildingContext(BaseModel):
    """
    Holds all state during a single frame generation pass.

    The analyzer validates the spec and fills in the layout.
    Rules add generated elements.
    The generator orchestrates the flow.
    """
    # Input
    spec: DimensionalSpec
    config: GenerationConfig = Field(default_factory=GenerationConfig)

    # Analysis results (populated by the analyzer)
    layout: FrameLayout | None = None
    warnings: list[GenerationWarning] = []

    # Output (populated by rules)
    elements: list[StructuralElement] = []

    def add_element(self, element: StructuralElement) -> None:
        self.elements.append(element)

    def add_elements(self, elements: list[StructuralElement]) -> None:
        self.elements.extend(elements)

    def warn(self, warning: GenerationWarning) -> None:
        self.warnings.append(warning)

    def wall_span(self, wall: WallSide) -> float:
        """Effective span of a wall: building width for endwalls, rounded length for sidewalls."""
        if wall.is_endwall:
            return self.spec.width
        if self.layout is None:
            raise RuntimeError("wall span requested before analysis")
        return self.layout.rounded_length
