# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
import holoviews as hv
import pytest

from mct.fastplot.config import AxisOrientation
from mct.fastplot.fakes import (
    FakeAugmentation,
    FakeMatrixResolver,
    FakePlotView,
    make_feed_cell,
)
from mct.fastplot.holoviews_surface import HoloViewsPlotSurface
from mct.fastplot.plot_data_assigner import PlotDataAssigner


@pytest.fixture
def surface() -> HoloViewsPlotSurface:
    return HoloViewsPlotSurface()


class TestHoloViewsPlotSurface:
    def test_defaults(self, surface):
        assert surface.axis_orientation is AxisOrientation.VALUE_AXIS
        assert surface.use_long_names is False
        assert surface.subplots == {}

    def test_series_are_grouped_by_subplot(self, surface):
        surface.add_series(0, 'A', 'a')
        surface.add_series(1, 'B', 'b')
        surface.add_series(0, 'C', 'c')

        assert [s.series_id for s in surface.subplots[0].series] == ['A', 'C']
        assert [s.label for s in surface.subplots[1].series] == ['b']

    def test_augmentation_is_recorded(self, surface):
        augmentation = FakeAugmentation()
        surface.set_augmentation(2, augmentation)
        assert surface.subplots[2].augmentation is augmentation
        assert surface.subplots[2].series == []

    def test_subplot_is_overlay_of_labelled_curves(self, surface):
        surface.add_series(0, 'A', 'alpha')
        surface.add_series(0, 'B', 'beta')

        overlay = surface.create_subplot(0)

        assert isinstance(overlay, hv.Overlay)
        curves = list(overlay)
        assert len(curves) == 2
        assert all(isinstance(curve, hv.Curve) for curve in curves)
        assert [curve.label for curve in curves] == ['alpha', 'beta']

    def test_unknown_subplot_is_empty_overlay(self, surface):
        overlay = surface.create_subplot(5)
        assert isinstance(overlay, hv.Overlay)
        assert len(overlay) == 0

    def test_layout_has_one_entry_per_subplot(self, surface):
        surface.add_series(0, 'A', 'a')
        surface.add_series(1, 'B', 'b')
        layout = surface.create_layout()
        assert isinstance(layout, hv.Layout)
        assert len(layout) == 2

    def test_clear(self, surface):
        surface.add_series(0, 'A', 'a')
        surface.clear()
        assert surface.subplots == {}

    def test_used_as_plot_of_assigner(self):
        matrix = [
            [make_feed_cell('A'), make_feed_cell('B')],
            [make_feed_cell('C')],
        ]
        view = FakePlotView(plot=HoloViewsPlotSurface())
        assigner = PlotDataAssigner(view, FakeMatrixResolver(matrix))
        assigner.notify_feeds_changed()
        assigner.assign_to_subplots()

        assert sorted(view.plot.subplots) == [0, 1]
        assert [s.label for s in view.plot.subplots[0].series] == ['A', 'B']
