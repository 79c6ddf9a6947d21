"""Test configuration and fixtures."""

import logging
from collections.abc import Callable, Generator
from dataclasses import dataclass
from typing import Any

import pytest
import structlog


@dataclass(eq=False)
class Dto:
    """Linked test object; ``child`` is the next level down."""

    name: str
    child: "Dto | None" = None


def get_child(dto: Dto) -> Dto | None:
    return dto.child


class CountingAccessor:
    """Accessor stub that records how often it was called."""

    def __init__(self, func: Callable[[Any], Any] = get_child):
        self.func = func
        self.calls = 0
        self.inputs: list[Any] = []

    def __call__(self, value: Any) -> Any:
        self.calls += 1
        self.inputs.append(value)
        return self.func(value)


@pytest.fixture
def make_dtos() -> Callable[[int], list[Dto]]:
    """Factory for a fully linked list of DTOs, root first."""

    def _make(count: int) -> list[Dto]:
        dtos = [Dto(name=f"dto-{i}") for i in range(count)]
        for parent, child in zip(dtos, dtos[1:]):
            parent.child = child
        return dtos

    return _make


@pytest.fixture
def make_accessors() -> Callable[[int], list[CountingAccessor]]:
    """Factory for counting ``get_child`` accessors."""

    def _make(count: int) -> list[CountingAccessor]:
        return [CountingAccessor() for _ in range(count)]

    return _make


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Restore structlog and root logger state after a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)
