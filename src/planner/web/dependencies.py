"""FastAPI dependency injection for planner services."""

from functools import lru_cache
from typing import Annotated, Any

from fastapi import Depends

from planner.application.config import config_to_model, load_config_from_dict
from planner.application.templates.manager import TemplateManager
from planner.domain.entities import ConfigurationModel


@lru_cache(maxsize=1)
def get_template_manager() -> TemplateManager:
    """Dependency for TemplateManager."""
    return TemplateManager()


# Type aliases for cleaner endpoint signatures
TemplateManagerDep = Annotated[TemplateManager, Depends(get_template_manager)]


def design_from_payload(config: dict[str, Any]) -> ConfigurationModel:
    """Validate a request's design body into a ConfigurationModel.

    Raises:
        ConfigError: If the body is not a valid design (handled as 422).
    """
    return config_to_model(load_config_from_dict(config))
