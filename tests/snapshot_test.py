# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
import threading

import pytest

from mct.fastplot.snapshot import SnapshotPublisher


class CountingCompute:
    def __init__(self, results):
        self.results = list(results)
        self.versions: list[int] = []

    def __call__(self, version: int):
        self.versions.append(version)
        return self.results.pop(0)


def make_publisher(compute) -> SnapshotPublisher[tuple]:
    return SnapshotPublisher(
        compute=compute, is_empty=lambda snapshot: not snapshot, initial=()
    )


class TestSnapshotPublisher:
    def test_peek_returns_initial_without_computing(self):
        compute = CountingCompute([])
        publisher = make_publisher(compute)
        assert publisher.peek() == ()
        assert compute.versions == []
        assert publisher.version == 0

    def test_get_computes_when_empty(self):
        compute = CountingCompute([('a',)])
        publisher = make_publisher(compute)
        assert publisher.get() == ('a',)
        assert compute.versions == [1]
        assert publisher.version == 1

    def test_get_returns_same_object_when_not_empty(self):
        compute = CountingCompute([('a',)])
        publisher = make_publisher(compute)
        first = publisher.get()
        assert publisher.get() is first
        assert compute.versions == [1]

    def test_get_recomputes_while_result_stays_empty(self):
        compute = CountingCompute([(), ('a',)])
        publisher = make_publisher(compute)
        assert publisher.get() == ()
        assert publisher.get() == ('a',)
        assert compute.versions == [1, 2]

    def test_refresh_recomputes_unconditionally(self):
        compute = CountingCompute([('a',), ('b',)])
        publisher = make_publisher(compute)
        publisher.get()
        assert publisher.refresh() == ('b',)
        assert publisher.peek() == ('b',)
        assert publisher.version == 2

    def test_concurrent_first_reads_compute_once(self):
        started = threading.Event()
        release = threading.Event()
        versions = []

        def slow_compute(version):
            versions.append(version)
            started.set()
            release.wait(timeout=5)
            return ('a',)

        publisher = make_publisher(slow_compute)
        results = []
        threads = [
            threading.Thread(target=lambda: results.append(publisher.get()))
            for _ in range(4)
        ]
        threads[0].start()
        started.wait(timeout=5)
        for thread in threads[1:]:
            thread.start()
        release.set()
        for thread in threads:
            thread.join(timeout=5)

        assert versions == [1]
        assert len(results) == 4
        assert all(result is results[0] for result in results)

    def test_reads_from_within_compute_see_previous_snapshot(self):
        nested = []

        def compute(version):
            nested.append(publisher.get())
            nested.append(publisher.refresh())
            return ('a',)

        publisher = make_publisher(compute)
        assert publisher.get() == ('a',)
        assert nested == [(), ()]
        assert publisher.version == 1

    def test_refresh_from_within_compute_does_not_recompute(self):
        versions = []

        def compute(version):
            versions.append(version)
            publisher.refresh()
            return (version,)

        publisher = make_publisher(compute)
        publisher.get()
        assert publisher.refresh() == (2,)
        assert versions == [1, 2]

    def test_failed_compute_leaves_publisher_usable(self):
        results = iter([RuntimeError('boom'), ('a',)])

        def compute(version):
            result = next(results)
            if isinstance(result, Exception):
                raise result
            return result

        publisher = make_publisher(compute)
        with pytest.raises(RuntimeError, match='boom'):
            publisher.get()
        assert publisher.get() == ('a',)
        assert publisher.version == 1
