# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""
Aggregation of time and feed-info choices offered by a plot.

The aggregations use the same per-row capacity as feed assignment, but they do
not filter by feed type: a textual feed that is never plotted still contributes
its time systems and time formats.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .capabilities import FeedDescriptor, FeedInfo, FeedInfoProvider, Matrix
from .matrix import capacity_bounded, get_feed


def _aggregate_feed_values(
    matrix: Matrix, limit: int, extract: Callable[[FeedDescriptor], Iterable[str]]
) -> list[str]:
    # dict keeps first-seen order while deduplicating
    choices: dict[str, None] = {}
    for row in matrix:
        for cell in capacity_bounded(row, limit):
            feed = get_feed(cell)
            if feed is not None:
                choices.update(dict.fromkeys(extract(feed)))
    return list(choices)


def aggregate_time_system_choices(matrix: Matrix, limit: int) -> list[str]:
    """Time systems of all feeds within the row capacity, in first-seen order."""
    return _aggregate_feed_values(matrix, limit, lambda feed: feed.time_systems)


def aggregate_time_format_choices(matrix: Matrix, limit: int) -> list[str]:
    """Time formats of all feeds within the row capacity, in first-seen order."""
    return _aggregate_feed_values(matrix, limit, lambda feed: feed.time_formats)


def aggregate_feed_info_choices(matrix: Matrix, limit: int) -> set[FeedInfo]:
    """
    Collect feed info from cells exposing a :class:`FeedInfoProvider`.

    The provider of a cell is asked about every feed of that cell, not only the
    primary one. Feeds for which the provider returns None are skipped.

    Parameters
    ----------
    matrix:
        Rows of cells.
    limit:
        Maximum number of cells considered per row.
    """
    choices: set[FeedInfo] = set()
    for row in matrix:
        for cell in capacity_bounded(row, limit):
            provider = cell.get_capability(FeedInfoProvider)
            if provider is None:
                continue
            for feed in cell.get_capabilities(FeedDescriptor):
                feed_info = provider.get_feed_info(feed)
                if feed_info is not None:
                    choices.add(feed_info)
    return choices


def default_time_system_choice(choices: Iterable[str]) -> str | None:
    """Return the first time system choice, or None if there is none."""
    return next(iter(choices), None)
