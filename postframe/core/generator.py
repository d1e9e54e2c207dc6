"""Main frame generator: orchestrates analysis and rule execution."""

from __future__ import annotations
import logging

from postframe.models import (
    BuildingContext, DimensionalSpec, FrameModel, GenerationConfig,
)
from postframe.core.registry import RuleRegistry
from postframe.core.analyzer import SpecAnalyzer

logger = logging.getLogger(__name__)


class FrameGenerator:
    """
    Stateless frame generator.

    Takes a spec + config, runs analysis, executes applicable rules,
    and returns a complete FrameModel. Nothing is kept between calls;
    every call builds a new element list.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry
        self.analyzer = SpecAnalyzer()

    def generate(
        self,
        spec: DimensionalSpec,
        config: GenerationConfig | None = None,
    ) -> FrameModel:
        if config is None:
            config = GenerationConfig()

        context = BuildingContext(spec=spec, config=config)

        # Analysis phase: fails before any element exists
        self.analyzer.analyze(context)

        # Generation phase: run applicable rules
        rules = self.registry.get_applicable_rules(context)
        for rule in rules:
            elements = rule.generate(context)
            logger.debug("Rule %s produced %d elements", rule.get_id(), len(elements))
            context.add_elements([
                e.with_tags(rule=rule.get_id())
                for e in elements
            ])

        frame = FrameModel(elements=tuple(context.elements), warnings=tuple(context.warnings))
        logger.info(
            "Generated %d elements for %gx%g ft building (%d warnings)",
            frame.stats.total_elements, spec.width, context.layout.rounded_length,
            len(frame.warnings),
        )
        return frame
