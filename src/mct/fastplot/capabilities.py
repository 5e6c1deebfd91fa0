# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""
Capabilities exposed by source cells of the component hierarchy.

A source cell is an opaque handle resolved by an external hierarchy. The plot
data assigner never inspects a cell directly; it asks for capabilities by type:

- :class:`FeedDescriptor`: the primary plottable feed of a cell
- :class:`FeedInfoProvider`: describes feed variants of a cell
- :class:`FeedFilterProvider`: a filter that may be shared by all plotted feeds
- :class:`PlotAugmentationCapability`: decorations offered by the root component

A cell that does not support a capability returns ``None`` from
:meth:`SourceCell.get_capability`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, TypeVar

C = TypeVar('C')


class FeedType(str, Enum):
    """Value type carried by a feed."""

    NUMERIC = 'numeric'
    INTEGER = 'integer'
    FLOATING_POINT = 'floating_point'
    STRING = 'string'

    @property
    def is_textual(self) -> bool:
        return self is FeedType.STRING


@dataclass(frozen=True)
class FeedDescriptor:
    """
    Description of a single data feed.

    Identity is the subscription id: two descriptors with the same id compare
    equal and hash identically regardless of their remaining fields.

    Parameters
    ----------
    subscription_id:
        Identifier used to subscribe to the feed's data.
    feed_type:
        Value type of the feed. Textual feeds are never plotted.
    is_prediction:
        Whether the feed carries forecasted rather than measured values.
    canonical_name:
        Long, unambiguous name of the feed.
    legend_text:
        Short name used in plot legends.
    time_systems:
        Time systems in which the feed can be displayed.
    time_formats:
        Time formats supported by the feed.
    """

    subscription_id: str
    feed_type: FeedType = field(default=FeedType.NUMERIC, compare=False)
    is_prediction: bool = field(default=False, compare=False)
    canonical_name: str = field(default='', compare=False)
    legend_text: str = field(default='', compare=False)
    time_systems: tuple[str, ...] = field(default=(), compare=False)
    time_formats: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        # Allow lists or None from callers while keeping the descriptor hashable.
        object.__setattr__(self, 'time_systems', tuple(self.time_systems or ()))
        object.__setattr__(self, 'time_formats', tuple(self.time_formats or ()))

    def display_name(self, use_canonical_name: bool) -> str:
        """Name shown next to the feed's series."""
        return self.canonical_name if use_canonical_name else self.legend_text


@dataclass(frozen=True)
class FeedInfo:
    """Hashable record describing one variant of a feed."""

    feed_id: str
    name: str = ''
    properties: tuple[tuple[str, Any], ...] = ()


class FeedInfoProvider(ABC):
    """Capability describing the feed variants exposed by a cell."""

    @abstractmethod
    def get_feed_info(self, feed: FeedDescriptor) -> FeedInfo | None:
        """
        Return feed info for one of the cell's feeds.

        Parameters
        ----------
        feed:
            One of the descriptors returned by the cell's
            ``get_capabilities(FeedDescriptor)``.

        Returns
        -------
        :
            The feed info, or None if the provider has nothing for this feed.
        """


class FeedFilterProvider(ABC):
    """
    Capability filtering the values of a feed.

    Equality decides consensus: the plot uses a filter only when the owning
    components of all plotted feeds expose equal filter providers.
    """


class PlotAugmentationCapability(ABC):
    """Capability of a root component to decorate the plots it is shown in."""

    @abstractmethod
    def set_feeds(self, feeds: Iterable[FeedDescriptor]) -> None:
        """Inform the augmentation about all feeds shown in the plot."""


class SourceCell(Protocol):
    """Cell of the component matrix, queried for capabilities by type."""

    def get_capability(self, kind: type[C]) -> C | None:
        """Return the cell's capability of the given type, or None."""
        ...

    def get_capabilities(self, kind: type[C]) -> list[C]:
        """Return all of the cell's capabilities of the given type."""
        ...


Row = Sequence[SourceCell]
Matrix = Sequence[Row]


class MatrixResolver(Protocol):
    """Resolves the component hierarchy below a root into rows of cells."""

    def resolve_matrix(self, root: SourceCell, use_ordinal_position: bool) -> Matrix:
        """
        Resolve the matrix of cells to plot.

        Parameters
        ----------
        root:
            The component whose view is being assigned.
        use_ordinal_position:
            Group cells by their ordinal position rather than by parent.

        Returns
        -------
        :
            Rows of cells, each row being a candidate subplot.
        """
        ...
