from __future__ import annotations

import logging
from typing import Iterator

from pagesync.core.errors import ResourceExistsError, UnknownResourceError
from pagesync.core.store import PaginationStore

log = logging.getLogger(__name__)


class StoreRegistry:
    """
    Holds one PaginationStore per resource kind.

    A registry is an ordinary object: the app keeps one on ``app.state`` and
    tests build their own, so no store is shared between them.
    """

    def __init__(self) -> None:
        self._stores: dict[str, PaginationStore] = {}

    def create(self, resource: str, page_size: int) -> PaginationStore:
        if resource in self._stores:
            raise ResourceExistsError(resource)
        store = PaginationStore(resource, page_size)
        self._stores[resource] = store
        log.info(
            "pagination store created: %s (page_size=%s)",
            resource,
            page_size,
            extra={"resource": resource},
        )
        return store

    def get(self, resource: str) -> PaginationStore:
        try:
            return self._stores[resource]
        except KeyError:
            raise UnknownResourceError(resource) from None

    def get_or_create(self, resource: str, page_size: int) -> PaginationStore:
        if resource in self._stores:
            return self._stores[resource]
        return self.create(resource, page_size)

    def dispose(self, resource: str) -> None:
        """Remove the store and drop its subscribers. Unknown names are ignored."""
        store = self._stores.pop(resource, None)
        if store is None:
            return
        store.dispose()
        log.info("pagination store disposed: %s", resource, extra={"resource": resource})

    def dispose_all(self) -> None:
        for resource in list(self._stores):
            self.dispose(resource)

    @property
    def resources(self) -> list[str]:
        return sorted(self._stores)

    def __contains__(self, resource: object) -> bool:
        return resource in self._stores

    def __iter__(self) -> Iterator[PaginationStore]:
        return iter(list(self._stores.values()))

    def __len__(self) -> int:
        return len(self._stores)
