"""
Base class for entity management screens.

A screen holds the in-memory list of one entity type plus the lists its
forms cross-reference, and turns user actions into service calls. It is
the only place where failures are caught: a failed action is reported
through the notifier and leaves the list as it was.

Loads are versioned by a generation counter. Every load and every local
mutation takes a new generation; a load that resolves after a newer
generation was taken is discarded instead of overwriting fresher state.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Generic, Iterable, Optional, TypeVar

from logistics_console.shared.exceptions import LogisticsError

from .notifier import LoggingNotifier, Notifier

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def matches(query: str, fields: Iterable[Any]) -> bool:
    """Case-insensitive substring match of `query` against any field."""
    needle = query.strip().lower()
    if not needle:
        return True
    return any(needle in str(field).lower() for field in fields if field is not None)


class EntityScreen(ABC, Generic[T]):
    """
    In-memory list management for one entity type.

    Subclasses implement:
    - key_of(item): the item's identifier
    - search_fields(item): the values `search` matches against
    - _fetch(): fetch the entity list and the cross-referenced lists
    - _commit(items, refs): store a fetched snapshot
    """

    entity_label = "élément"

    def __init__(self, notifier: Optional[Notifier] = None) -> None:
        self.notifier = notifier or LoggingNotifier()
        self.items: list[T] = []
        self.loading = False
        self.last_error: Optional[LogisticsError] = None
        self._generation = 0
        self._latest_load = 0

    @property
    def generation(self) -> int:
        return self._generation

    @abstractmethod
    def key_of(self, item: T) -> Any:
        ...

    @abstractmethod
    def search_fields(self, item: T) -> Iterable[Any]:
        ...

    @abstractmethod
    async def _fetch(self) -> tuple[list[T], dict[str, Any]]:
        ...

    def _commit(self, items: list[T], refs: dict[str, Any]) -> None:
        self.items = items

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    async def load(self) -> bool:
        """
        (Re)load the entity list and its cross-referenced lists.

        Returns:
            True if the fetched snapshot was committed
        """
        generation = self._next_generation()
        self._latest_load = generation
        self.loading = True
        try:
            items, refs = await self._fetch()
        except LogisticsError as e:
            if generation == self._generation:
                self._report(e)
            return False
        finally:
            if generation == self._latest_load:
                self.loading = False

        if generation != self._generation:
            logger.debug(
                f"Discarding stale {type(self).__name__} load "
                f"(generation {generation}, current {self._generation})"
            )
            return False

        self._commit(items, refs)
        self.last_error = None
        return True

    def search(self, query: str) -> list[T]:
        """Filter the in-memory list; no request is made."""
        return [item for item in self.items if matches(query, self.search_fields(item))]

    def find(self, key: Any) -> Optional[T]:
        for item in self.items:
            if self.key_of(item) == key:
                return item
        return None

    async def _run(
        self,
        action: Callable[[], Awaitable[R]],
        success_message: Optional[str] = None,
    ) -> Optional[R]:
        """
        Run a user action, reporting its outcome.

        Returns:
            The action's result, or None if it failed
        """
        try:
            result = await action()
        except LogisticsError as e:
            self._report(e)
            return None
        if success_message:
            self.notifier.success(success_message)
        return result

    def _report(self, error: LogisticsError) -> None:
        logger.warning(f"{type(self).__name__} action failed: {error.code}")
        self.last_error = error
        self.notifier.error(error.message)

    # Local patches. Each one supersedes any load still in flight.

    def _append(self, item: T) -> None:
        self._next_generation()
        self.items = [*self.items, item]

    def _replace(self, item: T) -> None:
        self._next_generation()
        key = self.key_of(item)
        self.items = [item if self.key_of(existing) == key else existing for existing in self.items]

    def _remove(self, key: Any) -> None:
        self._next_generation()
        self.items = [item for item in self.items if self.key_of(item) != key]
