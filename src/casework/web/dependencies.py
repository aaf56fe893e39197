"""FastAPI dependency injection for casework services."""

from functools import lru_cache
from typing import Annotated, Any

from fastapi import Depends

from casework.application.commands import GenerateDrawingCommand
from casework.application.config import RuleStore, config_to_design, load_design_from_dict
from casework.application.factory import ServiceFactory, get_factory
from casework.domain import StructuredDesignData


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_generate_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> GenerateDrawingCommand:
    """Dependency for GenerateDrawingCommand."""
    return factory.create_generate_command()


def get_rule_store(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> RuleStore:
    """Dependency for the shared RuleStore."""
    return factory.get_rule_store()


def parse_design(payload: dict[str, Any]) -> StructuredDesignData:
    """Validate a design payload; ConfigError propagates to the 422 handler."""
    return config_to_design(load_design_from_dict(payload))


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
GenerateCommandDep = Annotated[GenerateDrawingCommand, Depends(get_generate_command)]
RuleStoreDep = Annotated[RuleStore, Depends(get_rule_store)]
