import asyncio

import pytest

from sequence import SequenceStore


class FakeSleep:
    """Records every requested wait and yields to the loop without real time."""

    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)
        await asyncio.sleep(0)


@pytest.fixture
def fake_sleep():
    return FakeSleep()


@pytest.fixture
def run_algorithm():
    """Run a sorting generator to completion, return (store, [(op, snapshot)])."""

    def _run(fn, values):
        store = SequenceStore()
        store.reset(values)
        trace = [(op, store.snapshot()) for op in fn(store)]
        return store, trace

    return _run
