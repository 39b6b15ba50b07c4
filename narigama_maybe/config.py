import dataclasses
import functools

from narigama_maybe import util


@dataclasses.dataclass(frozen=True)
class Config:
    # emit a log record when `option.get` is about to raise EmptyValueError
    log_empty_get: bool = util.env("NARIGAMA_MAYBE_LOG_EMPTY_GET:false", convert=util.boolean)
    log_level: str = util.env("NARIGAMA_MAYBE_LOG_LEVEL:DEBUG", convert=util.log_level)


def load() -> Config:
    """Build a Config from the current environment."""
    return Config()


@functools.cache
def active() -> Config:
    """The process-wide Config, loaded on first use.

    Raises ValueError if the environment holds a value that can't be converted,
    call `active.cache_clear()` after changing the environment."""
    return load()
