"""Constants and default values for propbag configuration.

This module centralizes the configuration constants and environment variable
settings used by the loaders and the command line interface.
"""

import os
from typing import Final

# =============================================================================
# Environment Variable Names
# =============================================================================

ENV_VAR_PREFIX: Final[str] = "PROPBAG_"

ENV_DEFAULT_FORMAT: Final[str] = f"{ENV_VAR_PREFIX}DEFAULT_FORMAT"
ENV_PRETTY_PRINT: Final[str] = f"{ENV_VAR_PREFIX}PRETTY_PRINT"
ENV_DROP_NULLS: Final[str] = f"{ENV_VAR_PREFIX}DROP_NULLS"


# =============================================================================
# Default Configuration Values
# =============================================================================

DEFAULT_FORMAT: Final[str] = "auto"
DEFAULT_PRETTY_PRINT: Final[bool] = True
DEFAULT_DROP_NULLS: Final[bool] = False


# =============================================================================
# File Format Constants
# =============================================================================

FILE_EXT_YAML: Final[str] = "yaml"
FILE_EXT_YML: Final[str] = "yml"
FILE_EXT_JSON: Final[str] = "json"

SUPPORTED_EXTENSIONS: Final[tuple[str, ...]] = (
    FILE_EXT_YAML,
    FILE_EXT_YML,
    FILE_EXT_JSON,
)


# =============================================================================
# Boolean String Parsing
# =============================================================================

TRUTHY_VALUES: Final[tuple[str, ...]] = ("true", "1", "yes", "on")


# =============================================================================
# Helper Functions
# =============================================================================


def get_env_bool(env_var: str, default: bool) -> bool:
    """
    Get boolean value from environment variable.

    Args:
        env_var: Environment variable name
        default: Default value if not set

    Returns:
        Boolean value from environment or default
    """
    value = os.getenv(env_var, str(default)).lower()
    return value in TRUTHY_VALUES


def get_env_str(env_var: str, default: str) -> str:
    """Get string value from environment variable or default."""
    return os.getenv(env_var, default)


# =============================================================================
# Configuration Value Getters (reads from environment)
# =============================================================================


def get_default_format() -> str:
    """Get default document format from environment or default."""
    return get_env_str(ENV_DEFAULT_FORMAT, DEFAULT_FORMAT).lower()


def get_pretty_print() -> bool:
    """Get pretty print flag from environment or default."""
    return get_env_bool(ENV_PRETTY_PRINT, DEFAULT_PRETTY_PRINT)


def get_drop_nulls() -> bool:
    """Get drop nulls flag from environment or default."""
    return get_env_bool(ENV_DROP_NULLS, DEFAULT_DROP_NULLS)


# =============================================================================
# Documentation
# =============================================================================

ENVIRONMENT_VARIABLE_DOCS = """
Environment Variables Reference:

  PROPBAG_DEFAULT_FORMAT   - Property document format: yaml|json|auto
                             Default: auto (detected from file extension)
  PROPBAG_PRETTY_PRINT     - Indent rendered XML: true|false
                             Default: true
  PROPBAG_DROP_NULLS       - Drop null values from documents instead of
                             failing: true|false
                             Default: false
"""
