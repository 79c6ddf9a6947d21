"""Builder for typed accessor chains."""

from collections.abc import Callable
from typing import Generic, TypeVar

from nullsafe.accessor import Accessor, fetch_chain, fetch_chain_or_default, is_chain_present

T = TypeVar("T")
R = TypeVar("R")


class Chain(Generic[T]):
    """Immutable accessor chain built one step at a time.

    Each :meth:`then` returns a new chain typed by the step's result, so a
    type checker follows the whole walk. Terminal methods delegate to the
    functions in :mod:`nullsafe.accessor`.

    Example:
        >>> city = Chain(order).then(lambda o: o.customer).then(lambda c: c.city).get()
    """

    __slots__ = ("_root", "_accessors")

    def __init__(self, root: T | None, accessors: tuple[Accessor | None, ...] = ()) -> None:
        """Initialize chain.

        Args:
            root: Starting value, may be None
            accessors: Steps already in the chain
        """
        self._root = root
        self._accessors = accessors

    @property
    def steps(self) -> int:
        """Number of accessors in the chain."""
        return len(self._accessors)

    def then(self, accessor: Callable[[T], R | None] | None) -> "Chain[R]":
        """Return a new chain with ``accessor`` appended."""
        return Chain(self._root, (*self._accessors, accessor))  # type: ignore[arg-type]

    def get(self) -> T | None:
        """Resolve the chain, or None if any link is absent."""
        return fetch_chain(self._root, *self._accessors)

    def get_or_default(self, default: T) -> T:
        """Resolve the chain, falling back to ``default`` if it is absent."""
        return fetch_chain_or_default(self._root, default, *self._accessors)

    def is_present(self) -> bool:
        """Check whether the chain resolves to a value."""
        return is_chain_present(self._root, *self._accessors)

    def __repr__(self) -> str:
        return f"Chain(root={self._root!r}, steps={self.steps})"
