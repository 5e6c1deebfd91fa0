#!/usr/bin/env python
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""
Demo of assigning feeds to subplots.

Builds a small in-memory component matrix, assigns its feeds to a HoloViews
surface and prints the resulting plan. Optionally saves the (empty) layout.

Run with:
    python examples/plot_assignment_demo.py --shared-axis --output demo.html
"""
# ruff: noqa: T201

from __future__ import annotations

import argparse

import holoviews as hv

from mct.fastplot import AxisOrientation, FeedType, PlotDataAssigner
from mct.fastplot.config import load_plot_settings
from mct.fastplot.fakes import (
    FakeFilterProvider,
    FakeMatrixResolver,
    FakePlotView,
    make_feed_cell,
)
from mct.fastplot.holoviews_surface import HoloViewsPlotSurface
from mct.fastplot.logging_config import bind_plot_view, configure_logging


def build_matrix():
    limits = FakeFilterProvider('limits')
    return [
        [
            make_feed_cell(
                'PUI1001', limits, time_systems=['GMT'], time_formats=['ISO']
            ),
            make_feed_cell('PUI1002', limits, time_systems=['GMT', 'ERT']),
            make_feed_cell('PUI1003', limits, is_prediction=True),
        ],
        [
            make_feed_cell('STATUS', feed_type=FeedType.STRING, time_systems=['SCLK']),
            make_feed_cell('PUI2001', limits),
        ],
    ]


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--shared-axis', action='store_true')
    parser.add_argument('--long-names', action='store_true')
    parser.add_argument('--settings', default=None, help='YAML plot settings')
    parser.add_argument('--output', default=None, help='Save layout as HTML')
    parser.add_argument('--log-level', default='INFO')
    args = parser.parse_args()

    configure_logging(level=args.log_level)
    bind_plot_view('demo')

    orientation = (
        AxisOrientation.TIME_AS_SHARED_AXIS
        if args.shared_axis
        else AxisOrientation.VALUE_AXIS
    )
    surface = HoloViewsPlotSurface(
        axis_orientation=orientation, use_long_names=args.long_names
    )
    view = FakePlotView(plot=surface)
    assigner = PlotDataAssigner(
        view, FakeMatrixResolver(build_matrix()), load_plot_settings(args.settings)
    )

    visible = assigner.get_visible_feeds()
    print(f'Subplots: {assigner.subplot_count()}')
    print(f'Visible feeds: {[feed.subscription_id for feed in visible]}')
    print(f'Predictive: {[f.subscription_id for f in assigner.get_predictive_feeds()]}')
    print(f'Time systems: {assigner.get_time_system_choices()}')
    print(f'Time formats: {assigner.get_time_format_choices()}')
    print(f'Filter: {assigner.get_filter_consensus()}')

    assigner.assign_to_subplots()
    for index, subplot in sorted(surface.subplots.items()):
        print(f'Subplot {index}: {[s.series_id for s in subplot.series]}')

    if args.output is not None:
        hv.extension('bokeh')
        hv.save(surface.create_layout(), args.output)
        print(f'Saved layout to {args.output}')


if __name__ == '__main__':
    main()
