"""
An Option explicitly represents the presence (Some) or absence (Nothing) of a
value, without ever using a sentinel like None to mean "missing".

Lift raw values at the edge of your code with `of_val`, `of_nullable` or
`of_undefinable`, work on Options with `map`, `bind` and friends, and only
unwrap deliberately with `get`, `to_nullable`, `with_default` or `or_else`.

    name = option.of_nullable(settings.get("name"))
    greeting = option.map(lambda n: "Hello {}".format(n), name)
    option.with_default("Hello stranger", greeting)
"""
import inspect
from collections.abc import Callable
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic
from typing import TypeVar

from loguru import logger

from narigama_maybe import config
from narigama_maybe import util
from narigama_maybe.problem import EmptyValueError


T = TypeVar("T")
U = TypeVar("U")
IN1 = TypeVar("IN1")
IN2 = TypeVar("IN2")
IN3 = TypeVar("IN3")
OUT = TypeVar("OUT")

VARIANTS = ("Some", "Nothing")


@dataclass(frozen=True)
class Option(Generic[T]):
    """Either Some(value) or Nothing(), never anything else.

    The free functions in this module are the primary API, the methods below
    are shortcuts onto them.
    """

    def __new__(cls, *args, **kwargs):
        if cls is Option:
            raise TypeError("Option can't be built directly, use Some(value) or Nothing().")
        return super().__new__(cls)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # the variants are closed, nothing else may claim to be an Option
        if cls.__module__ != __name__ or cls.__name__ not in VARIANTS:
            raise TypeError("Can't subclass Option: {} is not one of {}".format(cls.__name__, ", ".join(VARIANTS)))

    def has_value(self) -> bool:
        """Check if the Option contains a value or not."""
        return is_some(self)

    def is_empty(self) -> bool:
        return is_none(self)

    def get_value(self) -> T:
        """Attempt to get value, raises EmptyValueError if missing."""
        return get(self)

    def get_value_or(self, default: U | Callable[[], U]) -> T | U:
        """Attempt to get a value, or return the provided default.

        The default may either be a value, or a fn() -> U"""
        if inspect.isfunction(default):
            return or_else(default, self)
        return with_default(default, self)

    def map_value(self, fn: Callable[[T], U]) -> "Option[U]":
        return map(fn, self)

    def bind_value(self, fn: Callable[[T], "Option[U]"]) -> "Option[U]":
        return bind(fn, self)


@dataclass(frozen=True, repr=False)
class Some(Option[T]):
    value: T

    def __repr__(self) -> str:
        return "Option::Some({!r})".format(self.value)


@dataclass(frozen=True, repr=False)
class Nothing(Option[T]):
    def __repr__(self) -> str:
        return "Option::None"


def of_val(value: T | None, use_truthy_check: bool = False) -> Option[T]:
    """Lift a raw value into an Option.

    By default only None counts as absent, so falsy values like 0 or "" are
    Some. With `use_truthy_check` anything `util.is_falsy` accepts is Nothing.
    """
    absent = util.is_falsy(value) if use_truthy_check else value is None
    if absent:
        return Nothing()
    return Some(value)


def of_nullable(value: T | None) -> Option[T]:
    """Lift a value that may be None, e.g. the result of `dict.get`."""
    if value is None:
        return Nothing()
    return of_val(value)


def of_undefinable(value: T | None) -> Option[T]:
    """Lift a value that may be unset.

    Python has a single "no value" marker, so this treats None as absent
    exactly like `of_nullable`.
    """
    if value is None:
        return Nothing()
    return of_val(value)


def to_nullable(option: Option[T]) -> T | None:
    if is_some(option):
        return option.value
    return None


def is_some(option: Option[T]) -> bool:
    return isinstance(option, Some)


def is_none(option: Option[T]) -> bool:
    return not is_some(option)


def get(option: Option[T]) -> T:
    """Unwrap the value of a Some.

    This is the only function here that can fail, raising EmptyValueError for
    Nothing. Check with `is_some` first, or use `with_default` instead.
    """
    if is_some(option):
        return option.value

    err = EmptyValueError("Use is_some() before attempting get().", context={"option": repr(option)})
    try:
        settings = config.active()
    except ValueError as ex:
        # a broken environment must not hide the EmptyValueError
        raise err from ex

    if settings.log_empty_get:
        logger.log(settings.log_level, "{}", err)
    raise err


def with_default(default: T, option: Option[T]) -> T:
    if is_some(option):
        return option.value
    return default


def or_else(fn: Callable[[], T], option: Option[T]) -> T:
    """Like `with_default`, but the default is only built (by calling fn) when needed."""
    if is_some(option):
        return option.value
    return fn()


def map(fn: Callable[[IN1], OUT], option: Option[IN1]) -> Option[OUT]:
    """Map Option[IN1] to Option[OUT] via the provided callable.

    fn is only called for Some, if it may fail to produce a value use `bind`.
    """
    if is_some(option):
        return Some(fn(option.value))
    return Nothing()


def bind(fn: Callable[[IN1], Option[OUT]], option: Option[IN1]) -> Option[OUT]:
    """Chain a step that may itself produce Nothing.

    fn is only called for Some, and its result is returned as is.
    """
    if is_some(option):
        return fn(option.value)
    return Nothing()


def _pair(option1: Option[IN1], option2: Option[IN2]) -> Option[tuple[IN1, IN2]]:
    # option1 is always inspected before option2
    return bind(lambda value1: map(lambda value2: (value1, value2), option2), option1)


def map2(fn: Callable[[IN1, IN2], OUT], option1: Option[IN1], option2: Option[IN2]) -> Option[OUT]:
    """Some(fn(value1, value2)) if both Options are Some, otherwise Nothing."""
    return map(lambda values: fn(*values), _pair(option1, option2))


def map3(
    fn: Callable[[IN1, IN2, IN3], OUT],
    option1: Option[IN1],
    option2: Option[IN2],
    option3: Option[IN3],
) -> Option[OUT]:
    """Some(fn(value1, value2, value3)) if all three Options are Some, otherwise Nothing."""
    triple = bind2(
        lambda value1, value2: map(lambda value3: (value1, value2, value3), option3),
        option1,
        option2,
    )
    return map(lambda values: fn(*values), triple)


def bind2(fn: Callable[[IN1, IN2], Option[OUT]], option1: Option[IN1], option2: Option[IN2]) -> Option[OUT]:
    """fn(value1, value2) if both Options are Some, otherwise Nothing."""
    return bind(lambda values: fn(*values), _pair(option1, option2))


def combine(options: Iterable[Option[T]]) -> Option[list[T]]:
    """Turn many Options into one Option holding a list of their values, in order.

    Any Nothing makes the whole result Nothing, an empty input gives Some([]).
    """
    values = []
    for option in options:
        if is_none(option):
            return Nothing()
        values.append(option.value)
    return Some(values)


def iter(action: Callable[[T], object], option: Option[T]) -> None:
    """Call action(value) once for Some, do nothing for Nothing."""
    if is_some(option):
        action(option.value)
