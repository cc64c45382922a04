"""Well-known property names attached to tests."""

from typing import Final


class PropertyNames:
    """Names of the properties test frameworks commonly keep in a PropertyBag."""

    # Internal properties, prefixed with an underscore
    APP_DOMAIN: Final[str] = "_APPDOMAIN"
    JOIN_TYPE: Final[str] = "_JOINTYPE"
    PROCESS_ID: Final[str] = "_PID"
    PROVIDER_STACK_TRACE: Final[str] = "_PROVIDERSTACKTRACE"
    SKIP_REASON: Final[str] = "_SKIPREASON"

    # Descriptive properties
    AUTHOR: Final[str] = "Author"
    CATEGORY: Final[str] = "Category"
    DESCRIPTION: Final[str] = "Description"
    TEST_OF: Final[str] = "TestOf"

    # Execution properties
    APARTMENT_STATE: Final[str] = "ApartmentState"
    IGNORE_UNTIL_DATE: Final[str] = "IgnoreUntilDate"
    LEVEL_OF_PARALLELISM: Final[str] = "LevelOfParallelism"
    MAX_TIME: Final[str] = "MaxTime"
    ORDER: Final[str] = "Order"
    PARALLEL_SCOPE: Final[str] = "ParallelScope"
    REPEAT_COUNT: Final[str] = "Repeat"
    REQUIRES_THREAD: Final[str] = "RequiresThread"
    SET_CULTURE: Final[str] = "SetCulture"
    SET_UI_CULTURE: Final[str] = "SetUICulture"
    TIMEOUT: Final[str] = "Timeout"

    @classmethod
    def all(cls) -> list[str]:
        """All well-known names, in declaration order."""
        return [
            value for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        ]

    @classmethod
    def is_internal(cls, name: str) -> bool:
        """Internal properties start with an underscore."""
        return name.startswith("_")
