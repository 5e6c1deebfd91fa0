# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""Tests for building the subplot assignment plan."""

import pytest

from mct.fastplot.assignment import AssignmentPlan, build_assignment_plan
from mct.fastplot.capabilities import FeedDescriptor, FeedType
from mct.fastplot.fakes import FakeSourceCell, make_feed_cell


def ids(feeds) -> list[str]:
    return [feed.subscription_id for feed in feeds]


class TestBuildAssignmentPlan:
    def test_scenario_with_textual_feed(self, scenario_matrix):
        plan = build_assignment_plan(scenario_matrix, 3)

        assert [ids(feeds) for feeds in plan.subplots] == [['F1', 'F2'], ['F4']]
        assert ids(plan.visible_feeds) == ['F1', 'F2', 'F4']
        assert plan.predictive_feeds == ()

    def test_one_subplot_per_row_even_if_empty(self):
        matrix = [
            [],
            [FakeSourceCell('no-feed')],
            [make_feed_cell('T', feed_type=FeedType.STRING)],
            [make_feed_cell('F1')],
        ]
        plan = build_assignment_plan(matrix, 3)

        assert plan.subplot_count == 4
        assert [ids(feeds) for feeds in plan.subplots] == [[], [], [], ['F1']]

    def test_empty_matrix_gives_empty_plan(self):
        plan = build_assignment_plan([], 3)
        assert plan.subplot_count == 0
        assert plan.visible_feeds == ()
        assert dict(plan.components) == {}

    def test_row_is_truncated_to_capacity(self):
        row = [make_feed_cell(f'F{i}') for i in range(6)]
        plan = build_assignment_plan([row, row[:2]], 4)

        assert ids(plan.subplots[0]) == ['F0', 'F1', 'F2', 'F3']
        assert ids(plan.subplots[1]) == ['F0', 'F1']

    def test_textual_feed_uses_up_capacity(self):
        row = [
            make_feed_cell('T', feed_type=FeedType.STRING),
            make_feed_cell('F1'),
            make_feed_cell('F2'),
        ]
        plan = build_assignment_plan([row], 2)
        assert ids(plan.subplots[0]) == ['F1']

    def test_zero_capacity_keeps_nothing(self, scenario_matrix):
        plan = build_assignment_plan(scenario_matrix, 0)
        assert plan.subplots == ((), ())
        assert plan.visible_feeds == ()

    def test_row_order_is_preserved(self):
        row = [make_feed_cell(name) for name in ['Z', 'A', 'M']]
        plan = build_assignment_plan([row], 3)
        assert ids(plan.subplots[0]) == ['Z', 'A', 'M']

    def test_predictive_feeds_are_subset_of_visible(self):
        matrix = [
            [
                make_feed_cell('P1', is_prediction=True),
                make_feed_cell('F1'),
            ],
            [
                make_feed_cell('P2', is_prediction=True, feed_type=FeedType.STRING),
                make_feed_cell('P3', is_prediction=True),
            ],
            [
                make_feed_cell('F2'),
                make_feed_cell('F3'),
                make_feed_cell('P4', is_prediction=True),
            ],
        ]
        plan = build_assignment_plan(matrix, 2)

        assert ids(plan.predictive_feeds) == ['P1', 'P3']
        assert set(plan.predictive_feeds) <= set(plan.visible_feeds)

    def test_components_map_feeds_to_owning_cells(self, scenario_matrix):
        plan = build_assignment_plan(scenario_matrix, 3)
        f1_cell, f2_cell = scenario_matrix[0]
        f4_cell = scenario_matrix[1][1]

        assert plan.component_of(FeedDescriptor('F1')) is f1_cell
        assert plan.component_of(FeedDescriptor('F4')) is f4_cell
        assert plan.component_of(FeedDescriptor('F3')) is None
        assert plan.feeds_of(f2_cell) == [FeedDescriptor('F2')]
        assert plan.distinct_components() == [f1_cell, f2_cell, f4_cell]

    def test_duplicate_feed_is_owned_by_last_cell(self):
        first = make_feed_cell('F1')
        second = make_feed_cell('F1')
        plan = build_assignment_plan([[first], [second]], 3)

        assert len(plan.components) == 1
        assert plan.component_of(FeedDescriptor('F1')) is second
        assert ids(plan.visible_feeds) == ['F1', 'F1']

    def test_plan_components_are_read_only(self, scenario_matrix):
        plan = build_assignment_plan(scenario_matrix, 3)
        with pytest.raises(TypeError):
            plan.components[FeedDescriptor('X')] = FakeSourceCell('x')


class TestAssignmentPlan:
    def test_default_plan_is_empty(self):
        plan = AssignmentPlan()
        assert plan.subplot_count == 0
        assert plan.distinct_components() == []
