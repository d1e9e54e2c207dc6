"""Rule registry: discovers, stores, and resolves layout rules."""

from __future__ import annotations

from postframe.models.context import BuildingContext
from postframe.rules.base import FramingRule


class RuleRegistry:
    """
    Central registry for all layout rules.

    Rules are registered at startup. During generation, the registry
    returns the applicable rules sorted by priority with dependencies
    resolved.
    """

    def __init__(self) -> None:
        self._rules: dict[str, FramingRule] = {}

    def register(self, rule: FramingRule) -> None:
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> FramingRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[FramingRule]:
        """Return all registered rules in execution order."""
        rules = sorted(self._rules.values(), key=lambda r: r.priority)
        return self._resolve_order(rules)

    def get_applicable_rules(self, context: BuildingContext) -> list[FramingRule]:
        """
        Return rules that apply to the given context, sorted by priority.

        Respects GenerationConfig.enabled_rules and disabled_rules.
        """
        config = context.config
        candidates = list(self._rules.values())

        if config.enabled_rules:
            candidates = [r for r in candidates if r.get_id() in config.enabled_rules]

        if config.disabled_rules:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_rules]

        applicable = [r for r in candidates if r.applies(context)]

        # Sort by priority (lower first), then resolve dependencies
        applicable.sort(key=lambda r: r.priority)
        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[FramingRule]) -> list[FramingRule]:
        """Topological sort respecting dependencies."""
        rule_map = {r.get_id(): r for r in rules}
        visited: set[str] = set()
        ordered: list[FramingRule] = []

        def visit(rule_id: str) -> None:
            if rule_id in visited:
                return
            visited.add(rule_id)
            rule = rule_map.get(rule_id)
            if rule is None:
                return
            for dep_id in rule.dependencies:
                visit(dep_id)
            ordered.append(rule)

        for r in rules:
            visit(r.get_id())

        return ordered


def create_default_registry() -> RuleRegistry:
    """Create a registry with every standard post-frame rule."""
    from postframe.rules.foundation.slab import SlabRule
    from postframe.rules.wall.posts import SidewallPostRule, EndwallPostRule
    from postframe.rules.wall.girts import GirtRule
    from postframe.rules.wall.openings import OpeningFrameRule
    from postframe.rules.roof.bearers import BearerRule
    from postframe.rules.roof.trusses import TrussRule
    from postframe.rules.roof.purlins import PurlinRule
    from postframe.rules.roof.fascia import FasciaRule
    from postframe.rules.skin.sheeting import WallSkinRule, RoofSkinRule

    registry = RuleRegistry()
    for rule in (
        SlabRule(),
        SidewallPostRule(),
        EndwallPostRule(),
        BearerRule(),
        TrussRule(),
        GirtRule(),
        PurlinRule(),
        FasciaRule(),
        OpeningFrameRule(),
        WallSkinRule(),
        RoofSkinRule(),
    ):
        registry.register(rule)
    return registry
