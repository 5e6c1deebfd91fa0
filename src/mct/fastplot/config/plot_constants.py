# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""Constants shared between plot views and the plot data assigner."""

import enum

GROUP_BY_ORDINAL_POSITION = 'GroupByOrdinalPosition'
"""View property selecting how the component matrix groups cells into rows."""


class AxisOrientation(str, enum.Enum):
    """Role of the plot's non-value axis."""

    VALUE_AXIS = 'value_axis'
    TIME_AS_SHARED_AXIS = 'time_as_shared_axis'
