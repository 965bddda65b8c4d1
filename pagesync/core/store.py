from __future__ import annotations

import itertools
import logging
from typing import Any, Callable

from pagesync.schemas.pagination import PaginationState

log = logging.getLogger(__name__)

Listener = Callable[[], None]

_handle_ids = itertools.count(1)


def _as_int(value: Any, default: int) -> int:
    # bool is an int subclass but never a meaningful page or total
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


class Subscription:
    """Handle returned by ``PaginationStore.subscribe``."""

    __slots__ = ("id", "listener", "_store")

    def __init__(self, store: PaginationStore, listener: Listener) -> None:
        self.id = next(_handle_ids)
        self.listener = listener
        self._store = store

    @property
    def active(self) -> bool:
        return self._store.is_subscribed(self)

    def unsubscribe(self) -> None:
        self._store.unsubscribe(self)

    def __repr__(self) -> str:
        return f"<Subscription id={self.id} store={self._store.resource!r}>"


class PaginationStore:
    """
    Authoritative pagination snapshot for one resource.

    Every state change replaces the snapshot as a whole and then calls each
    subscriber synchronously with no arguments. Subscribers re-read
    ``get_state()``; they are never handed a payload.

    Inputs are clamped, never rejected:
      - ``traverse`` clamps the target into ``[0, pages - 1]`` and does
        nothing (no notification) when that equals the current page.
      - ``apply_collection_refresh`` clamps the current page down to the new
        last page and always notifies.
    """

    def __init__(self, resource: str, page_size: int) -> None:
        self.resource = resource
        self._state = PaginationState(page_size=page_size)
        self._subscriptions: list[Subscription] = []

    def get_state(self) -> PaginationState:
        return self._state

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, listener: Listener) -> Subscription:
        handle = Subscription(self, listener)
        self._subscriptions.append(handle)
        return handle

    def unsubscribe(self, handle: Subscription) -> None:
        # identity match, the same listener may be registered more than once
        for i, sub in enumerate(self._subscriptions):
            if sub is handle:
                del self._subscriptions[i]
                return

    def is_subscribed(self, handle: Subscription) -> bool:
        return any(sub is handle for sub in self._subscriptions)

    def traverse(self, target_page: Any) -> None:
        """Navigate to ``target_page``; a request that clamps to the current page is ignored."""
        state = self._state
        target = _as_int(target_page, default=state.page)
        page = min(max(target, 0), state.last_page)

        if page == state.page:
            log.debug(
                "traverse ignored",
                extra={"resource": self.resource, "page": page, "pages": state.pages},
            )
            return

        self._replace(state.model_copy(update={"page": page}))
        log.debug(
            "traverse",
            extra={"resource": self.resource, "page": page, "pages": state.pages},
        )
        self._emit_change()

    def apply_collection_refresh(self, total_count: Any) -> None:
        """Apply a fresh collection size from the data source."""
        state = self._state
        total = max(_as_int(total_count, default=0), 0)
        # integer ceiling division, exact for totals beyond float range
        pages = -(-total // state.page_size)
        # keep the user near where they were: clamp to the new last page
        page = min(state.page, max(pages - 1, 0))

        self._replace(
            PaginationState(
                page=page,
                page_size=state.page_size,
                pages=pages,
                total_count=total,
            )
        )
        log.debug(
            "collection refresh",
            extra={
                "resource": self.resource,
                "page": page,
                "pages": pages,
                "total_count": total,
            },
        )
        self._emit_change()

    def dispose(self) -> None:
        """Drop every subscription. Later changes reach no one."""
        if self._subscriptions:
            log.debug(
                "disposing store with live subscriptions",
                extra={"resource": self.resource, "subscribers": len(self._subscriptions)},
            )
        self._subscriptions.clear()

    def _replace(self, state: PaginationState) -> None:
        self._state = state

    def _emit_change(self) -> None:
        # iterate over a copy so listeners may unsubscribe while we notify
        for sub in list(self._subscriptions):
            sub.listener()

    def __repr__(self) -> str:
        s = self._state
        return (
            f"<PaginationStore {self.resource!r} page={s.page} pages={s.pages} "
            f"total_count={s.total_count} subscribers={len(self._subscriptions)}>"
        )
