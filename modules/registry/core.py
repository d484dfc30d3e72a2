"""Registry module — ordered collection of test definitions.

Registration never fails: definitions are stored exactly as given,
duplicate names included. ``validate()`` is called when a run begins
and is where malformed definitions surface.

This module depends only on domain/ types and has zero external imports beyond stdlib.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

from domain.models import TestDefinition

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from domain.ports import Workload

logger = logging.getLogger("pybench.registry")


class InvalidTestDefinitionError(ValueError):
    """A registered definition cannot be run."""

    def __init__(self, index: int, name: str, reason: str) -> None:
        super().__init__(f"Test #{index} ({name!r}): {reason}")
        self.index = index
        self.name = name
        self.reason = reason


def _accepts_one_argument(workload: object) -> bool:
    """Return True if *workload* can be called with a single positional argument.

    Callables without an introspectable signature (some builtins) are
    given the benefit of the doubt.
    """
    try:
        signature = inspect.signature(workload)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(1)
    except TypeError:
        return False
    return True


def _problem_with(definition: TestDefinition) -> str | None:
    """Return a human-readable reason the definition is invalid, or None."""
    if not isinstance(definition.name, str) or not definition.name:
        return "name must be a non-empty string"
    count = definition.iteration_count
    if isinstance(count, bool) or not isinstance(count, int):
        return f"iteration count must be an integer, got {type(count).__name__}"
    if count <= 0:
        return f"iteration count must be positive, got {count}"
    if not callable(definition.workload):
        return "workload is not callable"
    if not _accepts_one_argument(definition.workload):
        return "workload must accept exactly one argument (the iteration count)"
    return None


class Registry:
    """Holds test definitions in registration order."""

    def __init__(self) -> None:
        self._tests: list[TestDefinition] = []

    def add_test(self, name: str, iteration_count: int, workload: Workload) -> None:
        """Append a definition. Never raises; see ``validate()``."""
        self._tests.append(
            TestDefinition(name=name, iteration_count=iteration_count, workload=workload)
        )
        logger.debug("Registered %r (%s iterations)", name, iteration_count)

    def extend(self, definitions: Iterable[TestDefinition]) -> None:
        """Append already-built definitions, keeping their order."""
        for definition in definitions:
            self._tests.append(definition)

    def names(self) -> list[str]:
        """Return registered names in order (duplicates kept)."""
        return [t.name for t in self._tests]

    def validate(self) -> None:
        """Raise ``InvalidTestDefinitionError`` for the first unusable definition."""
        for index, definition in enumerate(self._tests):
            reason = _problem_with(definition)
            if reason is not None:
                raise InvalidTestDefinitionError(index, str(definition.name), reason)

    def __iter__(self) -> Iterator[TestDefinition]:
        return iter(tuple(self._tests))

    def __len__(self) -> int:
        return len(self._tests)
