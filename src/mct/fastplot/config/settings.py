# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""Plot settings model and loading."""

from __future__ import annotations

from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from typing import Any

import pydantic
import structlog
import yaml

from .environment import get_overrides
from .plot_constants import GROUP_BY_ORDINAL_POSITION

logger = structlog.get_logger(__name__)

_DEFAULTS_RESOURCE = 'defaults.yaml'


class PlotSettings(pydantic.BaseModel, frozen=True):
    """Settings governing how feeds are distributed over subplots."""

    max_items_per_plot: int = pydantic.Field(
        default=10,
        ge=0,
        description="Maximum number of feeds shown on a single subplot.",
        title="Max Items Per Plot",
    )
    non_time_feed_separator: str = pydantic.Field(
        default='\t',
        min_length=1,
        description="Separator joining the independent feed id and a dependent "
        "feed id when time is not an axis of the plot.",
        title="Non-time Feed Separator",
    )
    group_by_ordinal_position_key: str = pydantic.Field(
        default=GROUP_BY_ORDINAL_POSITION,
        description="View property selecting grouping by ordinal position.",
        title="Group By Ordinal Position Key",
    )

    def use_ordinal_position(self, view_properties: Mapping[str, Any]) -> bool:
        """
        Read the grouping mode from view properties.

        An absent or empty property means grouping by ordinal position. Any
        other value is true only if it spells ``true``, ignoring case but not
        surrounding whitespace.
        """
        value = view_properties.get(self.group_by_ordinal_position_key)
        if value is None or value == '':
            return True
        return str(value).lower() == 'true'


def load_plot_settings(path: Path | str | None = None) -> PlotSettings:
    """
    Load plot settings from YAML and apply environment overrides.

    Parameters
    ----------
    path:
        YAML file to read. If None, the bundled defaults are used.

    Returns
    -------
    :
        Validated settings.

    Raises
    ------
    pydantic.ValidationError
        If the merged configuration is invalid.
    """
    if path is None:
        text = resources.files(__package__).joinpath(_DEFAULTS_RESOURCE).read_text()
        source = _DEFAULTS_RESOURCE
    else:
        text = Path(path).read_text()
        source = str(path)

    raw = yaml.safe_load(text) or {}
    if not isinstance(raw, dict):
        logger.warning("Settings file does not contain a mapping", source=source)
        raw = {}

    overrides = get_overrides()
    if overrides:
        logger.info("Applying plot settings overrides", keys=sorted(overrides))
    settings = PlotSettings.model_validate({**raw, **overrides})
    logger.debug("Loaded plot settings", source=source, settings=settings)
    return settings
