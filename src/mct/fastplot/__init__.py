# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
# ruff: noqa: E402, I

import importlib.metadata

try:
    __version__ = importlib.metadata.version("mct-fastplot")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"

del importlib

from .assignment import AssignmentPlan, SubplotAssignment, build_assignment_plan
from .capabilities import (
    FeedDescriptor,
    FeedFilterProvider,
    FeedInfo,
    FeedInfoProvider,
    FeedType,
    MatrixResolver,
    PlotAugmentationCapability,
    SourceCell,
)
from .config import AxisOrientation, PlotSettings, load_plot_settings
from .partitioner import NotReady, Partitioned, PartitionResult, RenderSurface
from .plot_data_assigner import FeedSnapshot, PlotDataAssigner, PlotViewHost

__all__ = [
    "AssignmentPlan",
    "AxisOrientation",
    "FeedDescriptor",
    "FeedFilterProvider",
    "FeedInfo",
    "FeedInfoProvider",
    "FeedSnapshot",
    "FeedType",
    "MatrixResolver",
    "NotReady",
    "PartitionResult",
    "Partitioned",
    "PlotAugmentationCapability",
    "PlotDataAssigner",
    "PlotSettings",
    "PlotViewHost",
    "RenderSurface",
    "SourceCell",
    "SubplotAssignment",
    "build_assignment_plan",
    "load_plot_settings",
]
