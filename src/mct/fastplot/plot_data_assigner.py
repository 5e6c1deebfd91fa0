# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""
PlotDataAssigner - Manages the adding and removing of data feeds for plots.

Every recomputation resolves the component matrix of the plot's root component
and derives, in one pass on the calling thread:

- the assignment of plottable feeds to subplots
- the time system, time format and feed info choices
- the filter provider shared by all plotted feeds

The result is published as an immutable :class:`FeedSnapshot`. Reads that find
no visible feeds trigger a recomputation; :meth:`notify_feeds_changed` forces
one.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

import structlog

from .assignment import AssignmentPlan, build_assignment_plan
from .capabilities import (
    FeedDescriptor,
    FeedFilterProvider,
    FeedInfo,
    MatrixResolver,
    PlotAugmentationCapability,
    SourceCell,
)
from .choices import (
    aggregate_feed_info_choices,
    aggregate_time_format_choices,
    aggregate_time_system_choices,
    default_time_system_choice,
)
from .config.settings import PlotSettings
from .filter_consensus import resolve_filter_consensus
from .partitioner import (
    NotReady,
    PartitionResult,
    Partitioned,
    RenderSurface,
    apply_render_calls,
    partition,
)
from .snapshot import SnapshotPublisher

logger = structlog.get_logger(__name__)


class PlotViewHost(Protocol):
    """The plot view whose feeds are being assigned."""

    @property
    def manifested_component(self) -> SourceCell:
        """Root component shown by the view."""
        ...

    @property
    def view_properties(self) -> Mapping[str, Any]:
        """Persisted properties of the view."""
        ...

    @property
    def plot(self) -> RenderSurface:
        """Surface series are added to."""
        ...

    def create_legend_entry(self, component: SourceCell | None) -> Any:
        """Build the legend entry representing a component."""
        ...


@dataclass(frozen=True)
class FeedSnapshot:
    """Everything derived from one resolution of the component matrix."""

    version: int = 0
    plan: AssignmentPlan | None = None
    filter_consensus: FeedFilterProvider | None = None
    time_system_choices: tuple[str, ...] = ()
    time_format_choices: tuple[str, ...] = ()
    feed_info_choices: frozenset[FeedInfo] = field(default_factory=frozenset)

    @property
    def visible_feeds(self) -> tuple[FeedDescriptor, ...]:
        return () if self.plan is None else self.plan.visible_feeds

    @property
    def predictive_feeds(self) -> tuple[FeedDescriptor, ...]:
        return () if self.plan is None else self.plan.predictive_feeds


class PlotDataAssigner:
    """
    Assigns the feeds of a plot view's components to subplots.

    Parameters
    ----------
    view:
        The plot view being populated.
    resolver:
        Resolves the view's root component into a matrix of cells.
    settings:
        Capacity and separator settings. Defaults are used if None.
    """

    def __init__(
        self,
        view: PlotViewHost,
        resolver: MatrixResolver,
        settings: PlotSettings | None = None,
    ) -> None:
        self._view = view
        self._resolver = resolver
        self._settings = settings or PlotSettings()
        self._snapshots: SnapshotPublisher[FeedSnapshot] = SnapshotPublisher(
            compute=self._compute_snapshot,
            is_empty=lambda snapshot: not snapshot.visible_feeds,
            initial=FeedSnapshot(),
        )

    @property
    def settings(self) -> PlotSettings:
        return self._settings

    @property
    def plan(self) -> AssignmentPlan | None:
        """The published assignment plan, None before the first recomputation."""
        return self._snapshots.peek().plan

    @property
    def snapshot_version(self) -> int:
        return self._snapshots.version

    def get_visible_feeds(self) -> tuple[FeedDescriptor, ...]:
        """Feeds shown in the plot, recomputed if there are none."""
        return self._snapshots.get().visible_feeds

    def get_predictive_feeds(self) -> tuple[FeedDescriptor, ...]:
        """Visible feeds carrying predictions, recomputed if there are no feeds."""
        return self._snapshots.get().predictive_feeds

    def get_time_system_choices(self) -> list[str]:
        return list(self._snapshots.get().time_system_choices)

    def get_time_system_default_choice(self) -> str | None:
        return default_time_system_choice(self._snapshots.get().time_system_choices)

    def get_time_format_choices(self) -> list[str]:
        return list(self._snapshots.get().time_format_choices)

    def get_feed_info_choices(self) -> set[FeedInfo]:
        return set(self._snapshots.get().feed_info_choices)

    def get_filter_consensus(self) -> FeedFilterProvider | None:
        """Filter provider shared by the owning components of all plotted feeds."""
        return self._snapshots.get().filter_consensus

    def subplot_count(self) -> int:
        plan = self.plan
        return 0 if plan is None else plan.subplot_count

    def has_feeds(self) -> bool:
        """Return True if the published snapshot has visible feeds."""
        return bool(self._snapshots.peek().visible_feeds)

    def notify_feeds_changed(self) -> None:
        """Recompute all derived state from the current component matrix."""
        self._snapshots.refresh()

    def assign_to_subplots(self) -> PartitionResult:
        """
        Add the series of the published plan to the view's plot.

        Returns
        -------
        :
            The render calls that were performed, or :class:`NotReady` if no
            plan has been computed yet. Nothing is drawn in the latter case.
        """
        plot = self._view.plot
        root = self._view.manifested_component
        result = partition(
            self.plan,
            orientation=plot.axis_orientation,
            limit=self._settings.max_items_per_plot,
            separator=self._settings.non_time_feed_separator,
            use_long_names=bool(plot.use_long_names),
            augmentation=root.get_capability(PlotAugmentationCapability),
            legend_entry_factory=self._view.create_legend_entry,
        )
        match result:
            case Partitioned(calls=calls):
                apply_render_calls(plot, calls)
            case NotReady(reason=reason):
                logger.warning("Cannot assign feeds to subplots", reason=reason)
        return result

    def _use_ordinal_position(self) -> bool:
        return self._settings.use_ordinal_position(self._view.view_properties)

    def _compute_snapshot(self, version: int) -> FeedSnapshot:
        matrix = self._resolver.resolve_matrix(
            self._view.manifested_component, self._use_ordinal_position()
        )
        limit = self._settings.max_items_per_plot
        logger.debug("Resolved component matrix", rows=len(matrix), version=version)

        plan = build_assignment_plan(matrix, limit)
        snapshot = FeedSnapshot(
            version=version,
            plan=plan,
            filter_consensus=resolve_filter_consensus(plan.distinct_components()),
            time_system_choices=tuple(aggregate_time_system_choices(matrix, limit)),
            time_format_choices=tuple(aggregate_time_format_choices(matrix, limit)),
            feed_info_choices=frozenset(aggregate_feed_info_choices(matrix, limit)),
        )
        logger.debug(
            "Recomputed plot feeds",
            version=version,
            subplots=plan.subplot_count,
            feeds=len(plan.visible_feeds),
        )
        return snapshot
