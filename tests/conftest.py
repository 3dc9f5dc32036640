# tests/conftest.py
"""Shared test configuration.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/

Generation Configuration:
    Strategies read the active GenerationConfig when they are built, and
    test modules build most of theirs at import time. The preset is
    therefore installed here, before any test module is collected. The
    "small" preset keeps nested devices small enough for the default
    Hypothesis buffer; override it with:
    ASTARTE_GENERATORS_PRESET=default pytest tests/
"""

import os

from hypothesis import Phase, Verbosity, settings

from astarte_generators.core.config import PRESET_ENV_VAR, configure, load_config

# =============================================================================
# Hypothesis Configuration
# =============================================================================

# CI profile: Fast tests for continuous integration
settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

# Nightly profile: Thorough testing for scheduled runs
settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Debug profile: Minimal examples with verbose output for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))

# =============================================================================
# Generation Configuration
# =============================================================================

configure(load_config(preset=os.getenv(PRESET_ENV_VAR, "small")))
