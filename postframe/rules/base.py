"""Abstract base class for all layout rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each generates a specific family of building elements
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to the current context
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from postframe.models.context import BuildingContext, FrameLayout
from postframe.models.framing import StructuralElement

SIDES = (-1, 1)


class FramingRule(ABC):
    """
    Base class for all layout rules.

    Subclasses implement `applies()` and `generate()`.
    The generator queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `generate()` in order.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'roof.trusses')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Roof Trusses')."""
        ...

    def applies(self, context: BuildingContext) -> bool:
        """Return True if this rule should run for the given context."""
        return context.layout is not None

    @abstractmethod
    def generate(self, context: BuildingContext) -> list[StructuralElement]:
        """
        Generate building elements for the given context.

        The context provides the spec, config and the derived layout
        from the analysis phase.
        """
        ...

    @staticmethod
    def layout_of(context: BuildingContext) -> FrameLayout:
        if context.layout is None:
            raise RuntimeError("rule executed before analysis")
        return context.layout
