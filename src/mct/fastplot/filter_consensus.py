# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
from __future__ import annotations

from collections.abc import Iterable

from .capabilities import FeedFilterProvider, SourceCell


def resolve_filter_consensus(
    components: Iterable[SourceCell],
) -> FeedFilterProvider | None:
    """
    Find the filter provider shared by all components.

    Parameters
    ----------
    components:
        Owning components of the plotted feeds.

    Returns
    -------
    :
        The common filter provider, or None if there are no components, if any
        component has no filter provider, or if two providers differ.
    """
    result: FeedFilterProvider | None = None
    for component in components:
        provider = component.get_capability(FeedFilterProvider)
        if provider is None or (result is not None and result != provider):
            return None
        result = provider
    return result
