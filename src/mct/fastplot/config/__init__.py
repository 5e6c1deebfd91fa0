# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors

from .plot_constants import GROUP_BY_ORDINAL_POSITION, AxisOrientation
from .settings import PlotSettings, load_plot_settings

__all__ = [
    'GROUP_BY_ORDINAL_POSITION',
    'AxisOrientation',
    'PlotSettings',
    'load_plot_settings',
]
