"""Dependency injection for FastAPI routes."""

from functools import partial
from typing import Annotated, Callable

from fastapi import Depends

from app.config import Settings, get_settings
from app.services.generator import LlmsTxtGenerator

GeneratorFactory = Callable[[], LlmsTxtGenerator]


def get_generator_factory(settings: Annotated[Settings, Depends(get_settings)]) -> GeneratorFactory:
    """Return a callable that builds a generator with fresh clients.

    Construction is deferred so routes can validate input before any
    collaborator client (and its credential check) is created.
    """
    return partial(LlmsTxtGenerator.from_settings, settings)


# Type aliases for dependency injection
AppSettings = Annotated[Settings, Depends(get_settings)]
Generators = Annotated[GeneratorFactory, Depends(get_generator_factory)]
