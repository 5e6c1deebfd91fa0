# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""
Assignment of feeds to subplots.

Each row of the component matrix becomes one subplot. Within a row only the
first ``limit`` cells are considered, and of those only cells with a plottable
feed are kept. The resulting :class:`AssignmentPlan` is immutable so it can be
published to readers on other threads in a single reference swap.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import structlog

from .capabilities import FeedDescriptor, Matrix, SourceCell
from .matrix import capacity_bounded, get_feed, is_plottable

logger = structlog.get_logger(__name__)

SubplotAssignment = tuple[FeedDescriptor, ...]


@dataclass(frozen=True)
class AssignmentPlan:
    """
    Feeds to plot, grouped by subplot.

    Parameters
    ----------
    subplots:
        One entry per matrix row, in row order. Entry ``i`` holds the feeds of
        subplot ``i`` in the order their cells appear in the row.
    visible_feeds:
        All kept feeds, subplot by subplot.
    predictive_feeds:
        The kept feeds that carry predictions.
    components:
        Owning cell of each kept feed, keyed by feed identity.
    """

    subplots: tuple[SubplotAssignment, ...] = ()
    visible_feeds: tuple[FeedDescriptor, ...] = ()
    predictive_feeds: tuple[FeedDescriptor, ...] = ()
    components: Mapping[FeedDescriptor, SourceCell] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def subplot_count(self) -> int:
        return len(self.subplots)

    def component_of(self, feed: FeedDescriptor) -> SourceCell | None:
        """Return the cell a feed was taken from."""
        return self.components.get(feed)

    def feeds_of(self, component: SourceCell) -> list[FeedDescriptor]:
        """Return the kept feeds owned by a cell."""
        return [feed for feed, owner in self.components.items() if owner is component]

    def distinct_components(self) -> list[SourceCell]:
        """Owning cells of the kept feeds, without repetition, in first-seen order."""
        seen: dict[int, SourceCell] = {}
        for component in self.components.values():
            seen.setdefault(id(component), component)
        return list(seen.values())


def build_assignment_plan(matrix: Matrix, limit: int) -> AssignmentPlan:
    """
    Build the subplot assignment for a component matrix.

    Parameters
    ----------
    matrix:
        Rows of cells. Every row yields a subplot, possibly an empty one.
    limit:
        Maximum number of cells considered per row.

    Returns
    -------
    :
        A new plan. The caller owns publication.
    """
    subplots: list[SubplotAssignment] = []
    visible: list[FeedDescriptor] = []
    predictive: list[FeedDescriptor] = []
    components: dict[FeedDescriptor, SourceCell] = {}

    for row in matrix:
        kept: list[FeedDescriptor] = []
        for cell in capacity_bounded(row, limit):
            feed = get_feed(cell)
            if feed is None or not is_plottable(feed):
                continue
            kept.append(feed)
            visible.append(feed)
            if feed.is_prediction:
                predictive.append(feed)
            components[feed] = cell
        subplots.append(tuple(kept))

    logger.debug(
        "Built assignment plan",
        subplots=len(subplots),
        feeds=len(visible),
        predictive=len(predictive),
    )
    return AssignmentPlan(
        subplots=tuple(subplots),
        visible_feeds=tuple(visible),
        predictive_feeds=tuple(predictive),
        components=MappingProxyType(components),
    )
