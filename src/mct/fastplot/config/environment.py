# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""Environment configuration for mct-fastplot."""

import os

ENV_VAR = 'FASTPLOT_ENV'
DEFAULT_ENV = 'dev'
PRODUCTION_ENV = 'production'

MAX_ITEMS_ENV_VAR = 'FASTPLOT_MAX_ITEMS'
SEPARATOR_ENV_VAR = 'FASTPLOT_SEPARATOR'


def get_environment() -> str:
    """Get the current environment name, defaulting to 'dev'."""
    return os.getenv(ENV_VAR, DEFAULT_ENV)


def is_production() -> bool:
    """Check if running in production environment."""
    return get_environment() == PRODUCTION_ENV


def get_overrides() -> dict[str, str]:
    """Plot settings overridden through environment variables."""
    overrides = {}
    if (max_items := os.getenv(MAX_ITEMS_ENV_VAR)) is not None:
        overrides['max_items_per_plot'] = max_items
    if (separator := os.getenv(SEPARATOR_ENV_VAR)) is not None:
        overrides['non_time_feed_separator'] = separator
    return overrides
