"""Configuration for propbag loaders and CLI."""

from propbag.config.constants import ENVIRONMENT_VARIABLE_DOCS
from propbag.config.settings import DocumentFormat, PropBagConfig, PropBagConfigDict

__all__ = [
    "DocumentFormat",
    "PropBagConfig",
    "PropBagConfigDict",
    "ENVIRONMENT_VARIABLE_DOCS",
]
