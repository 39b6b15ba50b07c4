import pytest
from loguru import logger

import narigama_maybe.config


class Recorder:
    """
    A callable that records every call made to it, returning `result` each time.
    """

    def __init__(self, result=None):
        self.result = result
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        return self.result

    @property
    def called(self) -> bool:
        return len(self.calls) > 0


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def logs():
    """Collect loguru records emitted while the test runs."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")

    try:
        yield records

    finally:
        logger.remove(handler_id)


@pytest.fixture(autouse=True)
def _config_cache():
    # every test starts and ends without a cached Config
    narigama_maybe.config.active.cache_clear()
    yield
    narigama_maybe.config.active.cache_clear()


@pytest.fixture
def config(monkeypatch: pytest.MonkeyPatch):
    """
    Enable logging through a known environment and return the active Config.
    """
    monkeypatch.setenv("NARIGAMA_MAYBE_LOG_EMPTY_GET", "true")
    monkeypatch.setenv("NARIGAMA_MAYBE_LOG_LEVEL", "warning")
    return narigama_maybe.config.active()
