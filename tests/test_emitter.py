import asyncio

import pytest

from algorithms.operation import Operation, LEFTOVER_PACE
from engine import StepEmitter, Recorder, RunConfig, compute_delay, MIN_DELAY_MS, POLL_INTERVAL_MS
from sequence import SequenceStore


def test_compute_delay_boundaries():
    assert compute_delay(1) == 834
    assert compute_delay(50) == 50
    assert compute_delay(25) == 450


def test_compute_delay_never_below_floor():
    delays = [compute_delay(v) for v in range(1, 51)]
    assert all(d >= MIN_DELAY_MS for d in delays)
    assert delays == sorted(delays, reverse=True)
    assert compute_delay(100) == MIN_DELAY_MS


def make_emitter(fake_sleep, delay_ms, is_paused=lambda: False):
    store = SequenceStore()
    store.reset([3, 1, 2])
    rec = Recorder(keep_log=True)
    emitter = StepEmitter(store, rec, delay_ms=delay_ms, is_paused=is_paused, sleep=fake_sleep)
    return store, rec, emitter


def test_emit_sleeps_then_notifies_with_snapshot(fake_sleep):
    store, rec, emitter = make_emitter(fake_sleep, lambda: 200)

    store.swap(0, 1)
    asyncio.run(emitter.emit(Operation.swap(0, 1)))

    assert fake_sleep.calls == [pytest.approx(0.2)]
    assert rec.steps == [(Operation.swap(0, 1), (1, 3, 2))]


def test_emit_scales_delay_by_pace(fake_sleep):
    _, _, emitter = make_emitter(fake_sleep, lambda: 300)

    async def go():
        await emitter.emit(Operation.overwrite(0, 5, pace=LEFTOVER_PACE))
        await emitter.emit(Operation.mark_sorted(0, 2))

    asyncio.run(go())
    assert fake_sleep.calls == [pytest.approx(0.2), 0.0]


def test_emit_reads_speed_live(fake_sleep):
    config = RunConfig(speed=1)
    _, _, emitter = make_emitter(fake_sleep, lambda: config.delay_ms)

    async def go():
        await emitter.emit(Operation.compare(0, 1))
        config.set_speed(50)
        await emitter.emit(Operation.compare(1, 2))

    asyncio.run(go())
    assert fake_sleep.calls == [pytest.approx(0.834), pytest.approx(0.05)]


def test_emit_polls_while_paused(fake_sleep):
    paused = iter([True, True, True, False])
    _, rec, emitter = make_emitter(fake_sleep, lambda: 100, is_paused=lambda: next(paused))

    asyncio.run(emitter.emit(Operation.compare(0, 1)))

    poll = POLL_INTERVAL_MS / 1000
    assert fake_sleep.calls == [poll, poll, poll, pytest.approx(0.1)]
    assert len(rec.steps) == 1
