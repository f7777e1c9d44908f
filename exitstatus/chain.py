"""Traversal of exception chains."""

from __future__ import annotations

from typing import Iterator


def unwrapped(exc: BaseException) -> BaseException | None:
    """Return what ``exc.unwrap()`` hands back, if ``exc`` has such a method."""
    unwrap = getattr(exc, "unwrap", None)
    if not callable(unwrap):
        return None
    try:
        inner = unwrap()
    except Exception:
        # A failing unwrap() exposes no payload.
        return None
    return inner if isinstance(inner, BaseException) else None


def links(exc: BaseException) -> list[BaseException]:
    """
    Return the exceptions directly reachable from ``exc``, in search order.

    Members of an exception group come first, then whatever the exception's
    ``unwrap()`` method returns (the payload of an ``ExitCodeError``, or of any
    foreign wrapper with the same method), then the explicit ``__cause__``.
    The implicit ``__context__`` is not followed: an exception that was merely
    being handled when ``exc`` was raised is not its cause.

    Parameters:
        exc (BaseException): The exception to inspect.

    Returns:
        list[BaseException]: The next links of the chain, possibly empty.
    """
    found: list[BaseException] = []
    if isinstance(exc, BaseExceptionGroup):
        found.extend(exc.exceptions)

    inner = unwrapped(exc)
    if inner is not None:
        found.append(inner)
    if exc.__cause__ is not None:
        found.append(exc.__cause__)
    return found


def walk(exc: BaseException | None) -> Iterator[BaseException]:
    """
    Yield every exception in the chain rooted at ``exc``, depth first.

    ``exc`` itself comes first. Each exception is yielded at most once, so
    chains that loop back on themselves still terminate.

    Parameters:
        exc (BaseException | None): Head of the chain; ``None`` yields nothing.

    Yields:
        BaseException: The links of the chain in search order.
    """
    seen: set[int] = set()
    stack = [exc] if exc is not None else []
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        # Reversed so the first successor is visited next.
        stack.extend(reversed(links(current)))


def find(exc: BaseException | None, predicate) -> BaseException | None:
    """Return the first link of the chain matching ``predicate``, if any."""
    for link in walk(exc):
        if predicate(link):
            return link
    return None
