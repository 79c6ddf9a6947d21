"""Absence-safe access to values behind nested accessor calls.

Two forms are provided. The direct form runs a zero-argument operation and
converts an absence failure raised anywhere inside it into ``None``:

    >>> fetch_safe(lambda: order.customer.address.city)

The chained form walks a root value through single-argument accessors and
stops at the first ``None``, so no accessor ever sees an absent input:

    >>> fetch_chain(order, lambda o: o.customer, lambda c: c.address)

Only absence-class errors (see :func:`is_absence_error`) are swallowed.
Every other exception raised by caller code propagates unchanged.
"""

from collections.abc import Callable
from typing import Any, TypeVar, overload

from nullsafe.exceptions import AbsentValueError, InvalidChainError
from nullsafe.utils.logging import get_logger

logger = get_logger(__name__)

V = TypeVar("V")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")
G = TypeVar("G")
H = TypeVar("H")
I = TypeVar("I")  # noqa: E741
J = TypeVar("J")

Accessor = Callable[[Any], Any]

# Messages CPython uses for item access and calls on None.
_NONE_TYPE_ERRORS = (
    "'NoneType' object is not subscriptable",
    "'NoneType' object is not callable",
)

_ABSENCE_CANDIDATES = (AbsentValueError, AttributeError, TypeError)


def is_absence_error(exc: BaseException) -> bool:
    """Check whether an exception means "a value along the way was absent".

    Absence-class errors are:

    - :class:`~nullsafe.exceptions.AbsentValueError`
    - ``AttributeError`` from an attribute lookup on ``None``
    - ``TypeError`` from subscripting or calling ``None``

    A hand-raised ``AttributeError`` carries no lookup context and a failed
    lookup on a real object carries that object, so neither counts.

    Args:
        exc: Exception to classify

    Returns:
        True if the exception signals absence
    """
    if isinstance(exc, AbsentValueError):
        return True
    if isinstance(exc, AttributeError):
        return exc.name is not None and exc.obj is None
    if isinstance(exc, TypeError):
        return str(exc).startswith(_NONE_TYPE_ERRORS)
    return False


def fetch_safe(op: Callable[[], V] | None) -> V | None:
    """Run an operation, turning absence anywhere inside it into ``None``.

    Args:
        op: Zero-argument operation, invoked exactly once

    Returns:
        Value produced by ``op``, or None if it hit an absent value

    Example:
        >>> fetch_safe(lambda: config.database.primary.host)
    """
    try:
        return op()  # type: ignore[misc]
    except _ABSENCE_CANDIDATES as exc:
        if not is_absence_error(exc):
            raise
        logger.debug("Operation hit absent value", error=str(exc))
        return None


def fetch_safe_or_default(op: Callable[[], V] | None, default: V) -> V:
    """Run an operation via :func:`fetch_safe`, falling back to ``default``."""
    value = fetch_safe(op)
    return default if value is None else value


def is_present(op: Callable[[], Any] | None) -> bool:
    """Check whether an operation produces a value without hitting absence."""
    return fetch_safe(op) is not None


def _validate_accessors(accessors: tuple[Accessor | None, ...]) -> None:
    if not accessors:
        raise InvalidChainError("At least one accessor is required")
    for position, accessor in enumerate(accessors, start=1):
        if accessor is not None and not callable(accessor):
            raise InvalidChainError(
                f"Accessor at position {position} is not callable: {accessor!r}"
            )


@overload
def fetch_chain(root: A | None, f1: Callable[[A], B | None] | None, /) -> B | None: ...
@overload
def fetch_chain(
    root: A | None,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    /,
) -> C | None: ...
@overload
def fetch_chain(
    root: A | None,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    f3: Callable[[C], D | None] | None,
    /,
) -> D | None: ...
@overload
def fetch_chain(
    root: A | None,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    f3: Callable[[C], D | None] | None,
    f4: Callable[[D], E | None] | None,
    /,
) -> E | None: ...
@overload
def fetch_chain(
    root: A | None,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    f3: Callable[[C], D | None] | None,
    f4: Callable[[D], E | None] | None,
    f5: Callable[[E], F | None] | None,
    /,
) -> F | None: ...
@overload
def fetch_chain(
    root: A | None,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    f3: Callable[[C], D | None] | None,
    f4: Callable[[D], E | None] | None,
    f5: Callable[[E], F | None] | None,
    f6: Callable[[F], G | None] | None,
    /,
) -> G | None: ...
@overload
def fetch_chain(
    root: A | None,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    f3: Callable[[C], D | None] | None,
    f4: Callable[[D], E | None] | None,
    f5: Callable[[E], F | None] | None,
    f6: Callable[[F], G | None] | None,
    f7: Callable[[G], H | None] | None,
    /,
) -> H | None: ...
@overload
def fetch_chain(
    root: A | None,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    f3: Callable[[C], D | None] | None,
    f4: Callable[[D], E | None] | None,
    f5: Callable[[E], F | None] | None,
    f6: Callable[[F], G | None] | None,
    f7: Callable[[G], H | None] | None,
    f8: Callable[[H], I | None] | None,
    /,
) -> I | None: ...
@overload
def fetch_chain(
    root: A | None,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    f3: Callable[[C], D | None] | None,
    f4: Callable[[D], E | None] | None,
    f5: Callable[[E], F | None] | None,
    f6: Callable[[F], G | None] | None,
    f7: Callable[[G], H | None] | None,
    f8: Callable[[H], I | None] | None,
    f9: Callable[[I], J | None] | None,
    /,
) -> J | None: ...
@overload
def fetch_chain(root: Any, /, *accessors: Accessor | None) -> Any: ...


def fetch_chain(root: Any, /, *accessors: Accessor | None) -> Any:
    """Apply accessors left to right, stopping at the first absent link.

    The walk stops and returns None as soon as the current value or the next
    accessor is None, or an accessor raises an absence-class error. Each
    accessor runs at most once and never receives None.

    Args:
        root: Starting value, may be None
        *accessors: Single-argument accessors; None entries are absent links

    Returns:
        Value produced by the last accessor, or None if any link was absent

    Raises:
        InvalidChainError: If no accessors are given or one is not callable
    """
    _validate_accessors(accessors)

    value = root
    for step, accessor in enumerate(accessors, start=1):
        if value is None:
            logger.debug(
                "Chain short-circuited",
                step=step,
                reason="root" if step == 1 else "value",
            )
            return None
        if accessor is None:
            logger.debug("Chain short-circuited", step=step, reason="accessor")
            return None
        try:
            value = accessor(value)
        except _ABSENCE_CANDIDATES as exc:
            if not is_absence_error(exc):
                raise
            logger.debug("Chain short-circuited", step=step, reason="error", error=str(exc))
            return None
    return value


def is_chain_present(root: Any, /, *accessors: Accessor | None) -> bool:
    """Check whether :func:`fetch_chain` yields a value for the same arguments."""
    return fetch_chain(root, *accessors) is not None


@overload
def fetch_chain_or_default(
    root: A | None, default: B, f1: Callable[[A], B | None] | None, /
) -> B: ...
@overload
def fetch_chain_or_default(
    root: A | None,
    default: C,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    /,
) -> C: ...
@overload
def fetch_chain_or_default(
    root: A | None,
    default: D,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    f3: Callable[[C], D | None] | None,
    /,
) -> D: ...
@overload
def fetch_chain_or_default(
    root: A | None,
    default: E,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    f3: Callable[[C], D | None] | None,
    f4: Callable[[D], E | None] | None,
    /,
) -> E: ...
@overload
def fetch_chain_or_default(
    root: A | None,
    default: F,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    f3: Callable[[C], D | None] | None,
    f4: Callable[[D], E | None] | None,
    f5: Callable[[E], F | None] | None,
    /,
) -> F: ...
@overload
def fetch_chain_or_default(
    root: A | None,
    default: G,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    f3: Callable[[C], D | None] | None,
    f4: Callable[[D], E | None] | None,
    f5: Callable[[E], F | None] | None,
    f6: Callable[[F], G | None] | None,
    /,
) -> G: ...
@overload
def fetch_chain_or_default(
    root: A | None,
    default: H,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    f3: Callable[[C], D | None] | None,
    f4: Callable[[D], E | None] | None,
    f5: Callable[[E], F | None] | None,
    f6: Callable[[F], G | None] | None,
    f7: Callable[[G], H | None] | None,
    /,
) -> H: ...
@overload
def fetch_chain_or_default(
    root: A | None,
    default: I,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    f3: Callable[[C], D | None] | None,
    f4: Callable[[D], E | None] | None,
    f5: Callable[[E], F | None] | None,
    f6: Callable[[F], G | None] | None,
    f7: Callable[[G], H | None] | None,
    f8: Callable[[H], I | None] | None,
    /,
) -> I: ...
@overload
def fetch_chain_or_default(
    root: A | None,
    default: J,
    f1: Callable[[A], B | None] | None,
    f2: Callable[[B], C | None] | None,
    f3: Callable[[C], D | None] | None,
    f4: Callable[[D], E | None] | None,
    f5: Callable[[E], F | None] | None,
    f6: Callable[[F], G | None] | None,
    f7: Callable[[G], H | None] | None,
    f8: Callable[[H], I | None] | None,
    f9: Callable[[I], J | None] | None,
    /,
) -> J: ...
@overload
def fetch_chain_or_default(root: Any, default: Any, /, *accessors: Accessor | None) -> Any: ...


def fetch_chain_or_default(root: Any, default: Any, /, *accessors: Accessor | None) -> Any:
    """Run :func:`fetch_chain`, returning ``default`` when the result is absent.

    Args:
        root: Starting value, may be None
        default: Fallback of the same type as the last accessor's result
        *accessors: Single-argument accessors

    Returns:
        Chain result, or ``default`` if it is None
    """
    value = fetch_chain(root, *accessors)
    return default if value is None else value
