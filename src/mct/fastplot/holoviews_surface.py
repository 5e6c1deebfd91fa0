# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""
Render surface backed by HoloViews.

Collects the series assigned to each subplot and renders them as a layout with
one overlay per subplot. Series are empty curves labelled with their display
name or legend entry; filling them with data is left to the data pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import holoviews as hv

from .capabilities import PlotAugmentationCapability
from .config.plot_constants import AxisOrientation


@dataclass
class SeriesSpec:
    series_id: str
    label: str


@dataclass
class SubplotSpec:
    series: list[SeriesSpec] = field(default_factory=list)
    augmentation: PlotAugmentationCapability | None = None


class HoloViewsPlotSurface:
    """
    Render surface building HoloViews elements.

    Parameters
    ----------
    axis_orientation:
        Role of the non-value axis.
    use_long_names:
        Whether series are labelled with canonical names.
    **opts:
        HoloViews options applied to every curve (e.g., line_width).
    """

    def __init__(
        self,
        axis_orientation: AxisOrientation = AxisOrientation.VALUE_AXIS,
        use_long_names: bool = False,
        **opts: Any,
    ) -> None:
        self.axis_orientation = axis_orientation
        self.use_long_names = use_long_names
        self._opts = opts
        self._subplots: dict[int, SubplotSpec] = {}

    @property
    def subplots(self) -> dict[int, SubplotSpec]:
        return self._subplots

    def add_series(self, subplot_index: int, series_id: str, label: Any) -> None:
        subplot = self._subplots.setdefault(subplot_index, SubplotSpec())
        subplot.series.append(SeriesSpec(series_id=series_id, label=str(label)))

    def set_augmentation(
        self, subplot_index: int, augmentation: PlotAugmentationCapability
    ) -> None:
        self._subplots.setdefault(subplot_index, SubplotSpec()).augmentation = (
            augmentation
        )

    def clear(self) -> None:
        self._subplots.clear()

    def create_subplot(self, subplot_index: int) -> hv.Overlay:
        """Create an overlay of empty curves for one subplot."""
        subplot = self._subplots.get(subplot_index)
        if subplot is None or not subplot.series:
            return hv.Overlay([])
        curves = [hv.Curve([], label=spec.label) for spec in subplot.series]
        if self._opts:
            curves = [curve.opts(**self._opts) for curve in curves]
        return hv.Overlay(curves)

    def create_layout(self) -> hv.Layout:
        """Create a single-column layout with one overlay per subplot."""
        overlays = [self.create_subplot(index) for index in sorted(self._subplots)]
        return hv.Layout(overlays).cols(1)
