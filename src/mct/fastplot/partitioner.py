# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""
Partitioning of an assignment plan onto a rendering surface.

Two strategies exist, selected by the axis orientation of the plot:

**Value axis**: every subplot of the plan is drawn on its own subplot of the
surface. Subplots holding a single feed are decorated with the plot
augmentation of the root component, if it has one.

**Time as shared axis**: all feeds go to subplot 0. The first feed of each
plan subplot is the independent feed; each following feed of that subplot is
drawn against it, identified as ``independent + separator + dependent``. At
most ``limit`` series are emitted in total.

Strategies are pure: they translate a plan into render calls.
:func:`apply_render_calls` performs the calls on a surface.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Protocol

import structlog

from .assignment import AssignmentPlan
from .capabilities import FeedDescriptor, PlotAugmentationCapability, SourceCell
from .config.plot_constants import AxisOrientation

logger = structlog.get_logger(__name__)


class RenderSurface(Protocol):
    """The plot that series are added to."""

    @property
    def axis_orientation(self) -> AxisOrientation: ...

    @property
    def use_long_names(self) -> bool: ...

    def add_series(self, subplot_index: int, series_id: str, label: Any) -> None:
        """Add a data series to a subplot, labelled by a name or legend entry."""
        ...

    def set_augmentation(
        self, subplot_index: int, augmentation: PlotAugmentationCapability
    ) -> None:
        """Decorate a subplot with a plot augmentation."""
        ...


@dataclass(frozen=True)
class AddSeries:
    subplot_index: int
    series_id: str
    label: Any


@dataclass(frozen=True)
class SetAugmentation:
    subplot_index: int
    augmentation: PlotAugmentationCapability


@dataclass(frozen=True)
class SetAugmentationFeeds:
    augmentation: PlotAugmentationCapability
    feeds: tuple[FeedDescriptor, ...]


RenderCall = AddSeries | SetAugmentation | SetAugmentationFeeds


@dataclass(frozen=True)
class Partitioned:
    """Render calls produced from an assignment plan."""

    orientation: AxisOrientation
    calls: tuple[RenderCall, ...]

    @property
    def series(self) -> list[AddSeries]:
        return [call for call in self.calls if isinstance(call, AddSeries)]


@dataclass(frozen=True)
class NotReady:
    """No assignment plan has been computed yet."""

    reason: str = 'Feeds to plot must be defined'


PartitionResult = Partitioned | NotReady


def partition_value_axis(
    plan: AssignmentPlan,
    *,
    limit: int,
    use_long_names: bool,
    augmentation: PlotAugmentationCapability | None,
) -> tuple[RenderCall, ...]:
    """
    Draw each plan subplot on the surface subplot with the same index.

    Parameters
    ----------
    plan:
        The assignment to draw.
    limit:
        Maximum number of series per subplot.
    use_long_names:
        Label series with canonical names instead of legend text.
    augmentation:
        Augmentation of the root component, if any.
    """
    calls: list[RenderCall] = []
    if augmentation is not None:
        calls.append(SetAugmentationFeeds(augmentation, tuple(plan.components)))
    for index, feeds in enumerate(plan.subplots):
        calls.extend(
            AddSeries(index, feed.subscription_id, feed.display_name(use_long_names))
            for feed in feeds[:limit]
        )
        if len(feeds) == 1 and augmentation is not None:
            calls.append(SetAugmentation(index, augmentation))
    return tuple(calls)


def partition_shared_axis(
    plan: AssignmentPlan,
    *,
    limit: int,
    separator: str,
    legend_entry_factory: Callable[[SourceCell | None], Any],
) -> tuple[RenderCall, ...]:
    """
    Draw all feeds on subplot 0, each dependent feed against its independent one.

    Parameters
    ----------
    plan:
        The assignment to draw.
    limit:
        Maximum number of series across all plan subplots together.
    separator:
        Joins the independent and a dependent subscription id.
    legend_entry_factory:
        Builds the legend entry of a series from the feed's owning component.
    """
    calls: list[RenderCall] = []
    for feeds in plan.subplots:
        independent: str | None = None
        for feed in feeds:
            if len(calls) >= limit:
                return tuple(calls)
            series_id = feed.subscription_id
            if independent is None:
                independent = series_id
            else:
                series_id = independent + separator + series_id
            legend_entry = legend_entry_factory(plan.component_of(feed))
            calls.append(AddSeries(0, series_id, legend_entry))
    return tuple(calls)


def partition(
    plan: AssignmentPlan | None,
    *,
    orientation: AxisOrientation,
    limit: int,
    separator: str,
    use_long_names: bool,
    augmentation: PlotAugmentationCapability | None,
    legend_entry_factory: Callable[[SourceCell | None], Any],
) -> PartitionResult:
    """Select the strategy for the axis orientation and translate the plan."""
    if plan is None:
        return NotReady()
    match orientation:
        case AxisOrientation.TIME_AS_SHARED_AXIS:
            calls = partition_shared_axis(
                plan,
                limit=limit,
                separator=separator,
                legend_entry_factory=legend_entry_factory,
            )
        case _:
            calls = partition_value_axis(
                plan,
                limit=limit,
                use_long_names=use_long_names,
                augmentation=augmentation,
            )
    logger.debug(
        "Partitioned assignment plan",
        orientation=orientation.value,
        calls=len(calls),
    )
    return Partitioned(orientation=orientation, calls=calls)


def apply_render_calls(surface: RenderSurface, calls: Iterable[RenderCall]) -> None:
    """Perform render calls in order."""
    for call in calls:
        match call:
            case AddSeries(subplot_index, series_id, label):
                surface.add_series(subplot_index, series_id, label)
            case SetAugmentation(subplot_index, augmentation):
                surface.set_augmentation(subplot_index, augmentation)
            case SetAugmentationFeeds(augmentation, feeds):
                augmentation.set_feeds(feeds)
