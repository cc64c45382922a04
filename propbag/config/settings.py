"""Runtime configuration for propbag loaders and CLI."""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import TypedDict

from propbag.common.exceptions import ConfigurationError
from propbag.config.constants import (
    DEFAULT_DROP_NULLS,
    DEFAULT_FORMAT,
    DEFAULT_PRETTY_PRINT,
    ENV_DEFAULT_FORMAT,
    FILE_EXT_JSON,
    get_default_format,
    get_drop_nulls,
    get_pretty_print,
)


class DocumentFormat(StrEnum):
    """Supported property document formats"""
    YAML = "yaml"
    JSON = "json"
    AUTO = "auto"  # Detect from file extension


class PropBagConfigDict(TypedDict, total=False):
    """TypedDict for configuration dictionary"""
    default_format: str
    pretty_print: bool
    drop_nulls: bool


def _parse_format(format_str: str) -> DocumentFormat:
    try:
        return DocumentFormat(format_str.lower())
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid default_format: {format_str}", config_key="default_format"
        ) from e


@dataclass(frozen=True)
class PropBagConfig:
    """Configuration for loading and rendering property documents"""

    default_format: DocumentFormat = DocumentFormat.AUTO
    pretty_print: bool = DEFAULT_PRETTY_PRINT
    drop_nulls: bool = DEFAULT_DROP_NULLS

    def __post_init__(self):
        """Validate configuration after initialization"""
        if not isinstance(self.default_format, DocumentFormat):
            raise ConfigurationError(
                f"Invalid default_format: {self.default_format}",
                config_key="default_format",
            )

    @classmethod
    def from_env(cls) -> 'PropBagConfig':
        """Create configuration from PROPBAG_* environment variables"""
        format_str = get_default_format()
        try:
            default_format = DocumentFormat(format_str)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid {ENV_DEFAULT_FORMAT}: {format_str}", config_key=ENV_DEFAULT_FORMAT
            ) from e

        return cls(
            default_format=default_format,
            pretty_print=get_pretty_print(),
            drop_nulls=get_drop_nulls(),
        )

    @classmethod
    def from_dict(cls, config_dict: PropBagConfigDict) -> 'PropBagConfig':
        """Create configuration from typed dictionary"""
        return cls(
            default_format=_parse_format(config_dict.get('default_format', DEFAULT_FORMAT)),
            pretty_print=config_dict.get('pretty_print', DEFAULT_PRETTY_PRINT),
            drop_nulls=config_dict.get('drop_nulls', DEFAULT_DROP_NULLS),
        )

    def resolve_format(self, file_path: Path, format_override: DocumentFormat | None = None) -> DocumentFormat:
        """
        Resolve the concrete format to read file_path with.

        An explicit override wins over the configured default; AUTO is resolved
        from the file extension, falling back to YAML for unknown extensions.
        """
        file_format = format_override or self.default_format
        if file_format != DocumentFormat.AUTO:
            return file_format

        extension = file_path.suffix.lstrip(".").lower()
        return DocumentFormat.JSON if extension == FILE_EXT_JSON else DocumentFormat.YAML

    def to_dict(self) -> PropBagConfigDict:
        """Convert configuration to typed dictionary"""
        return PropBagConfigDict(
            default_format=self.default_format.value,
            pretty_print=self.pretty_print,
            drop_nulls=self.drop_nulls,
        )

    def __str__(self) -> str:
        return f"PropBagConfig(format={self.default_format.value}, drop_nulls={self.drop_nulls})"
