"""External project generators, one per ``Framework``."""

from __future__ import annotations

from ..config import Config
from ..models import Framework
from .base import GeneratorError, ProjectGenerator
from .nestjs import DRIVER_PACKAGES, NestJsGenerator
from .spring_boot import SpringBootGenerator


def get_generator(framework: Framework, config: Config) -> ProjectGenerator:
    """Return the generator for *framework*."""
    if Framework(framework) is Framework.SPRINGBOOT:
        return SpringBootGenerator(config)
    return NestJsGenerator(config)


__all__ = [
    "DRIVER_PACKAGES",
    "GeneratorError",
    "NestJsGenerator",
    "ProjectGenerator",
    "SpringBootGenerator",
    "get_generator",
]
