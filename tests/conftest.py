# -*- coding: utf-8 -*-

from concurrent.futures import Future
from typing import Callable, Dict, List, Optional

import pytest

from services.session_service import SessionService
from storage.repos import COUNT_KEY, parse_count


class ManualScheduler:
    """Scheduler with a hand-driven clock. Jobs run in (due, submit) order."""

    def __init__(self):
        self.now = 0
        self._seq = 0
        self._jobs: Dict[int, tuple] = {}

    def now_ms(self) -> int:
        return self.now

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> int:
        self._seq += 1
        self._jobs[self._seq] = (self.now + max(0, int(delay_ms)), self._seq, fn)
        return self._seq

    def cancel(self, job: int) -> None:
        self._jobs.pop(job, None)

    @property
    def pending(self) -> int:
        return len(self._jobs)

    def advance(self, ms: int) -> None:
        target = self.now + ms
        while True:
            due = [j for j in self._jobs.items() if j[1][0] <= target]
            if not due:
                break
            job_id, (when, _, fn) = min(due, key=lambda j: (j[1][0], j[1][1]))
            del self._jobs[job_id]
            self.now = when
            fn()
        self.now = target

    def run_pending(self) -> None:
        self.advance(0)


class FakeStore:
    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})
        self.saves: List[int] = []
        self.hold_loads = False
        self.held: List[Future] = []
        self.fail_load = False
        self.fail_save = False

    def load_count(self) -> Future:
        fut: Future = Future()
        if self.fail_load:
            fut.set_exception(OSError("disk gone"))
        elif self.hold_loads:
            self.held.append(fut)
        else:
            fut.set_result(parse_count(self.data.get(COUNT_KEY)))
        return fut

    def release_loads(self) -> None:
        for fut in self.held:
            fut.set_result(parse_count(self.data.get(COUNT_KEY)))
        self.held = []

    def save_count(self, count: int) -> Future:
        fut: Future = Future()
        if self.fail_save:
            fut.set_exception(OSError("read-only"))
            return fut
        self.data[COUNT_KEY] = str(count)
        self.saves.append(count)
        fut.set_result(None)
        return fut


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def service(store, scheduler):
    svc = SessionService(store, scheduler, total_sets=10, rest_duration_ms=60000)
    snapshots = []
    svc.subscribe(snapshots.append)
    svc.snapshots = snapshots
    return svc
