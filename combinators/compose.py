import logging
from functools import reduce
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')
A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')


def identity(x: T) -> T:
    """Identity function - returns the input unchanged."""
    return x


def compose(f: Callable[[A], B], g: Callable[[B], C]) -> Callable[[A], C]:
    """
    Compose two unary functions, applying f first and then g.

    compose(f, g)(x) == g(f(x)). Errors raised by f or g pass through
    untouched; g is never called when f raises.
    """

    def composed(x: A) -> C:
        return g(f(x))

    return composed


def compose_all(*funcs: Callable) -> Callable:
    """
    Chain any number of unary functions left to right.

    compose_all(f, g, h)(x) == h(g(f(x))). With no functions the result
    is identity.
    """
    for position, func in enumerate(funcs):
        if not callable(func):
            raise TypeError(f"argument {position} is not callable: {func!r}")
    return reduce(compose, funcs, identity)


def pipe(value: Any, *funcs: Callable) -> Any:
    """
    Pipe a value through a series of functions.
    """
    return reduce(lambda acc, f: f(acc), funcs, value)


def tap(f: Callable[[T], Any]) -> Callable[[T], T]:
    """
    Execute a side effect and return the original value.
    Useful for debugging in pipelines.
    """

    def tapped(x: T) -> T:
        f(x)
        return x

    return tapped


def trace(label: str, level: int = logging.DEBUG) -> Callable[[T], T]:
    """Log the value flowing through a chain under the given label."""
    return tap(lambda x: logger.log(level, "%s: %r", label, x))
