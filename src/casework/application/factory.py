"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .commands import GenerateDrawingCommand
from .config import DEFAULT_RULES_PATH, RuleStore


@dataclass
class ServiceFactory:
    """Factory for the rule store and the commands built on it.

    A factory owns exactly one ``RuleStore`` so that every command it creates
    shares the same rules cache.

    Example:
        ```python
        factory = ServiceFactory(rules_path=Path("config/bom-rules.json"))
        output = factory.create_generate_command().execute(design)
        ```
    """

    rules_path: Path = DEFAULT_RULES_PATH

    _rule_store: RuleStore | None = field(default=None, init=False, repr=False)

    def get_rule_store(self) -> RuleStore:
        """Get or create the rule store instance."""
        if self._rule_store is None:
            self._rule_store = RuleStore(self.rules_path)
        return self._rule_store

    def create_generate_command(self) -> GenerateDrawingCommand:
        """Create a generation command bound to this factory's rule store."""
        return GenerateDrawingCommand(rule_store=self.get_rule_store())


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory
