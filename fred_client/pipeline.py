"""
Apply one connector call to a sequence of arguments, one blocking request at a time.

    with FREDConnector() as fred:
        for cats in iter_requests([1, 2, 3], fred.category):
            ...
        tags = request_all([(4, "usa"), (5, "gdp")], lambda a: fred.category_related_tags(*a))
"""
from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from fred_client.core.errors import FredError

A = TypeVar("A")
R = TypeVar("R")


def iter_requests(
    args: Iterable[A],
    fn: Callable[[A], R],
    *,
    return_exceptions: bool = False,
) -> Iterator[R | FredError]:
    """Lazily yield fn(arg) for each arg, in order.

    With return_exceptions=True a FredError for one argument is yielded in its place and
    iteration continues; otherwise it propagates and the iterator stops.
    """
    for arg in args:
        if not return_exceptions:
            yield fn(arg)
            continue
        try:
            result: R | FredError = fn(arg)
        except FredError as e:
            result = e
        yield result


def request_all(
    args: Iterable[A],
    fn: Callable[[A], R],
    *,
    return_exceptions: bool = False,
) -> list[R | FredError]:
    """Eager version of iter_requests."""
    return list(iter_requests(args, fn, return_exceptions=return_exceptions))
