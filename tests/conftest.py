# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""Shared test fixtures for plot data assignment tests."""

import pytest

from mct.fastplot.capabilities import FeedType
from mct.fastplot.config import PlotSettings
from mct.fastplot.fakes import (
    FakeMatrixResolver,
    FakePlotView,
    FakeSourceCell,
    make_feed_cell,
)


@pytest.fixture(autouse=True)
def _clear_settings_env(monkeypatch):
    """Keep environment overrides of the developer's shell out of the tests."""
    monkeypatch.delenv('FASTPLOT_MAX_ITEMS', raising=False)
    monkeypatch.delenv('FASTPLOT_SEPARATOR', raising=False)
    monkeypatch.delenv('FASTPLOT_ENV', raising=False)


@pytest.fixture
def settings() -> PlotSettings:
    """Settings with a small capacity and a readable separator."""
    return PlotSettings(max_items_per_plot=3, non_time_feed_separator='/')


@pytest.fixture
def scenario_matrix() -> list[list[FakeSourceCell]]:
    """Two rows: two numeric feeds, then a textual and a numeric feed."""
    return [
        [
            make_feed_cell('F1', time_systems=['GMT'], time_formats=['ISO']),
            make_feed_cell('F2', time_systems=['GMT'], time_formats=['DOY']),
        ],
        [
            make_feed_cell(
                'F3',
                feed_type=FeedType.STRING,
                time_systems=['ERT'],
                time_formats=['TEXT'],
            ),
            make_feed_cell('F4', time_systems=['SCLK']),
        ],
    ]


@pytest.fixture
def resolver(scenario_matrix) -> FakeMatrixResolver:
    return FakeMatrixResolver(scenario_matrix)


@pytest.fixture
def view() -> FakePlotView:
    return FakePlotView()
