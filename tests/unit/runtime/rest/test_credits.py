"""Unit tests for CreditTracker."""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from parcllabs.models import AccountInfo, AccountUsage
from parcllabs.runtime.rest import CreditTracker


def test_starts_at_zero():
    assert CreditTracker().snapshot() == AccountUsage(
        est_session_credits_used=0, est_remaining_credits=0
    )


def test_used_is_summed_and_remaining_is_overwritten():
    tracker = CreditTracker()
    tracker.record(AccountInfo(est_credits_used=5, est_remaining_credits=995))
    tracker.record(AccountInfo(est_credits_used=3, est_remaining_credits=992))

    assert tracker.session_credits_used == 8
    assert tracker.remaining_credits == 992


def test_none_is_a_no_op():
    tracker = CreditTracker()
    tracker.record(AccountInfo(est_credits_used=4, est_remaining_credits=10))
    tracker.record(None)

    assert tracker.snapshot() == AccountUsage(est_session_credits_used=4, est_remaining_credits=10)


def test_partial_metadata_updates_only_reported_field():
    tracker = CreditTracker()
    tracker.record(AccountInfo(est_credits_used=4, est_remaining_credits=10))
    tracker.record(AccountInfo(est_credits_used=2))
    tracker.record(AccountInfo(est_remaining_credits=7))

    assert tracker.session_credits_used == 6
    assert tracker.remaining_credits == 7


def test_trackers_are_independent():
    first, second = CreditTracker(), CreditTracker()
    first.record(AccountInfo(est_credits_used=1))

    assert second.session_credits_used == 0


@pytest.mark.asyncio
async def test_concurrent_tasks_lose_no_updates():
    tracker = CreditTracker()

    async def report(n: int) -> None:
        await asyncio.sleep(0)
        tracker.record(AccountInfo(est_credits_used=n, est_remaining_credits=1000 - n))

    await asyncio.gather(*(report(n) for n in range(1, 201)))

    assert tracker.session_credits_used == sum(range(1, 201))


def test_concurrent_threads_lose_no_updates():
    tracker = CreditTracker()

    def report(_: int) -> None:
        for _ in range(500):
            tracker.record(AccountInfo(est_credits_used=1))

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(report, range(8)))

    assert tracker.session_credits_used == 8 * 500
