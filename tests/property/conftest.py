"""Configuration for property-based tests.

Profiles for the bag operation and serialization properties. Pick one with
the HYPOTHESIS_PROFILE environment variable (default: "default").
"""

import os

from hypothesis import Verbosity, settings

# Local runs
settings.register_profile(
    "default",
    max_examples=200,
    deadline=200,
)

# CI: fixed example sequence, no deadline
settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    derandomize=True,
    print_blob=True,
)

# Thorough runs before a release
settings.register_profile(
    "nightly",
    max_examples=2000,
    deadline=None,
)

# Development settings for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    deadline=None,
    verbosity=Verbosity.verbose,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))
