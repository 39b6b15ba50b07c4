import dataclasses
import os
import typing

from loguru import logger


BOOLEAN_TRUE = ("1", "true", "yes", "on")
BOOLEAN_FALSE = ("0", "false", "no", "off", "")


def is_falsy(value: typing.Any) -> bool:
    """
    The falsy predicate used by `option.of_val(..., use_truthy_check=True)`.

    A value is falsy when `bool(value)` is False. That covers None, False,
    numeric zero of any type (0, 0.0, 0j, Decimal(0)), empty str and bytes,
    empty containers, and any object whose `__bool__` returns False or whose
    `__len__` returns 0.
    """
    return not bool(value)


def boolean(value: str) -> bool:
    """Convert an envvar string into a bool, raises ValueError if unrecognised."""
    normalised = value.strip().lower()
    if normalised in BOOLEAN_TRUE:
        return True
    if normalised in BOOLEAN_FALSE:
        return False
    raise ValueError("Can't convert '{}' to a boolean".format(value))


def log_level(value: str) -> str:
    """Convert an envvar string into a loguru level name, raises ValueError if loguru doesn't know it."""
    name = value.strip().upper()
    logger.level(name)
    return name


def env(key, convert=str, **kwargs):
    """
    A factory around `dataclasses.field` that can be used to load or default
    an envvar. If you wish to load from an external source, do that first and
    inject its keys/values into os.environ before instantiating your
    dataclass.

    Args:
        key: in the format of either KEY or KEY:DEFAULT
        convert: a function that accepts a string and returns a different type
        kwargs: any kwargs to be passed to `dataclasses.field`

    Returns:
        dataclasses.field

    Raises:
        KeyError: in the event an envvar isn't found and doesn't have a default
    """
    key, partition, default = key.partition(":")

    def default_factory(key=key, default=default, convert=convert):
        if key in os.environ:
            return convert(os.environ[key])

        # if a partition was detected use anything after it, even an empty string
        if partition == ":":
            return convert(default)
        raise KeyError(key)

    return dataclasses.field(default_factory=default_factory, **kwargs)
