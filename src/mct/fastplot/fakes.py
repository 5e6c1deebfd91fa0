# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""In-memory collaborators for testing and demonstrating the plot data assigner."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from .capabilities import (
    FeedDescriptor,
    FeedFilterProvider,
    FeedInfo,
    FeedInfoProvider,
    PlotAugmentationCapability,
)
from .config.plot_constants import AxisOrientation

C = TypeVar('C')


class FakeSourceCell:
    """
    A source cell holding a fixed list of capabilities.

    ``get_capability`` returns the first capability that is an instance of the
    requested type.
    """

    def __init__(self, name: str, capabilities: Iterable[Any] = ()) -> None:
        self.name = name
        self.capabilities = list(capabilities)

    def get_capability(self, kind: type[C]) -> C | None:
        return next((c for c in self.capabilities if isinstance(c, kind)), None)

    def get_capabilities(self, kind: type[C]) -> list[C]:
        return [c for c in self.capabilities if isinstance(c, kind)]

    def __repr__(self) -> str:
        return f'FakeSourceCell({self.name!r})'


class FakeMatrixResolver:
    """Returns a preset matrix and records how it was asked for it."""

    def __init__(self, matrix: list[list[FakeSourceCell]] | None = None) -> None:
        self.matrix = matrix if matrix is not None else []
        self.calls: list[tuple[Any, bool]] = []

    def resolve_matrix(self, root: Any, use_ordinal_position: bool):
        self.calls.append((root, use_ordinal_position))
        return self.matrix


@dataclass(frozen=True)
class FakeFilterProvider(FeedFilterProvider):
    """Filter provider compared by name."""

    name: str


class FakeFeedInfoProvider(FeedInfoProvider):
    """Returns feed info for every feed whose id is not in ``unknown``."""

    def __init__(self, unknown: Iterable[str] = ()) -> None:
        self.unknown = set(unknown)

    def get_feed_info(self, feed: FeedDescriptor) -> FeedInfo | None:
        if feed.subscription_id in self.unknown:
            return None
        return FeedInfo(feed_id=feed.subscription_id, name=feed.legend_text)


class FakeAugmentation(PlotAugmentationCapability):
    """Records the feeds it was given."""

    def __init__(self) -> None:
        self.feeds: list[tuple[FeedDescriptor, ...]] = []

    def set_feeds(self, feeds: Iterable[FeedDescriptor]) -> None:
        self.feeds.append(tuple(feeds))


@dataclass
class FakeRenderSurface:
    """Records series and augmentations added to it."""

    axis_orientation: AxisOrientation = AxisOrientation.VALUE_AXIS
    use_long_names: bool = False
    series: list[tuple[int, str, Any]] = field(default_factory=list)
    augmentations: list[tuple[int, PlotAugmentationCapability]] = field(
        default_factory=list
    )

    def add_series(self, subplot_index: int, series_id: str, label: Any) -> None:
        self.series.append((subplot_index, series_id, label))

    def set_augmentation(
        self, subplot_index: int, augmentation: PlotAugmentationCapability
    ) -> None:
        self.augmentations.append((subplot_index, augmentation))


@dataclass
class FakePlotView:
    """A plot view with a root component, properties and a render surface."""

    manifested_component: FakeSourceCell = field(
        default_factory=lambda: FakeSourceCell('root')
    )
    view_properties: dict[str, Any] = field(default_factory=dict)
    plot: Any = field(default_factory=FakeRenderSurface)

    def create_legend_entry(self, component: Any) -> str:
        return f'legend:{getattr(component, "name", component)}'


def make_feed_cell(
    subscription_id: str, *capabilities: Any, **feed_kwargs: Any
) -> FakeSourceCell:
    """Create a cell whose primary feed has the given id."""
    feed_kwargs.setdefault('legend_text', subscription_id)
    feed_kwargs.setdefault('canonical_name', f'canonical:{subscription_id}')
    feed = FeedDescriptor(subscription_id=subscription_id, **feed_kwargs)
    return FakeSourceCell(subscription_id, [feed, *capabilities])
