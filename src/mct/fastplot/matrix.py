# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""Traversal helpers shared by feed assignment and choice aggregation."""

from __future__ import annotations

import itertools
from collections.abc import Iterator

from .capabilities import FeedDescriptor, Row, SourceCell


def capacity_bounded(row: Row, limit: int) -> Iterator[SourceCell]:
    """
    Yield the first ``limit`` cells of a row.

    Every cell counts towards the limit, whether or not it ends up contributing
    to the artifact being built. Assignment and all choice aggregations
    therefore see the same prefix of each row.

    Parameters
    ----------
    row:
        Cells of one row of the component matrix.
    limit:
        Maximum number of cells to yield. Zero or negative yields nothing.
    """
    yield from itertools.islice(row, max(limit, 0))


def get_feed(cell: SourceCell) -> FeedDescriptor | None:
    """Return the primary feed of a cell, or None if it has none."""
    return cell.get_capability(FeedDescriptor)


def is_plottable(feed: FeedDescriptor) -> bool:
    """Textual feeds cannot be drawn on a plot."""
    return not feed.feed_type.is_textual
