from __future__ import annotations

import logging
from typing import Callable

from pagesync.core.store import PaginationStore, Subscription
from pagesync.core.window import compute_window
from pagesync.schemas.pagination import (
    PageLink,
    PagerControl,
    PagerRender,
    PaginationState,
)

log = logging.getLogger(__name__)

Renderer = Callable[[PagerRender], None]


def build_render(
    state: PaginationState,
    *,
    show_steps: bool = True,
    show_edges: bool = True,
) -> PagerRender:
    """
    Turn a snapshot into the controls a pager draws.

    ``show_steps`` toggles previous/next, ``show_edges`` toggles first/last.
    Both pairs stay hidden while the collection is too small for jumps.
    """
    page, pages = state.page, state.pages
    window = compute_window(page, pages)
    if pages <= 1:
        return PagerRender(page=page, pages=pages)

    back_disabled = not window.can_go_back
    forward_disabled = not window.can_go_forward
    edges_hidden = not (show_edges and window.show_edges)
    steps_hidden = not (show_steps and window.show_edges)

    return PagerRender(
        visible=True,
        page=page,
        pages=pages,
        links=tuple(
            PageLink(index=i, label=str(i + 1), current=i == page)
            for i in window.indices
        ),
        first=PagerControl(target=0, hidden=edges_hidden, disabled=back_disabled),
        previous=PagerControl(
            target=max(page - 1, 0), hidden=steps_hidden, disabled=back_disabled
        ),
        next=PagerControl(
            target=min(page + 1, pages - 1), hidden=steps_hidden, disabled=forward_disabled
        ),
        last=PagerControl(target=pages - 1, hidden=edges_hidden, disabled=forward_disabled),
    )


class PagerView:
    """
    Pagination widget bound to one store.

    Usage:
      with PagerView(store, renderer=draw, on_page=close_popover) as view:
          view.next()

    While mounted the view re-renders on every store notification. Leaving
    the ``with`` block (or calling ``unmount``) drops the subscription.
    """

    def __init__(
        self,
        store: PaginationStore,
        *,
        renderer: Renderer | None = None,
        on_page: Callable[[], None] | None = None,
        show_steps: bool = True,
        show_edges: bool = True,
    ) -> None:
        self.store = store
        self.renderer = renderer
        self.on_page = on_page
        self.show_steps = show_steps
        self.show_edges = show_edges
        self.state: PaginationState | None = None
        self.rendered: PagerRender | None = None
        self._subscription: Subscription | None = None

    @property
    def mounted(self) -> bool:
        return self._subscription is not None

    def mount(self) -> PagerView:
        if self._subscription is not None:
            return self
        self._subscription = self.store.subscribe(self._on_change)
        self._refresh()
        return self

    def unmount(self) -> None:
        if self._subscription is None:
            return
        self._subscription.unsubscribe()
        self._subscription = None
        log.debug("pager unmounted", extra={"resource": self.store.resource})

    def __enter__(self) -> PagerView:
        return self.mount()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unmount()

    # -------------------------- interactions ------------------------------ #

    def select(self, index: int) -> None:
        self._dispatch(index)

    def first(self) -> None:
        self._dispatch(0)

    def previous(self) -> None:
        self._dispatch(self.store.get_state().page - 1)

    def next(self) -> None:
        self._dispatch(self.store.get_state().page + 1)

    def last(self) -> None:
        self._dispatch(self.store.get_state().pages - 1)

    # -------------------------- internals --------------------------------- #

    def _dispatch(self, target: int) -> None:
        self.store.traverse(target)
        # fires whether or not the store changed
        if self.on_page is not None:
            self.on_page()

    def _on_change(self) -> None:
        self._refresh()

    def _refresh(self) -> None:
        self.state = self.store.get_state()
        self.rendered = build_render(
            self.state, show_steps=self.show_steps, show_edges=self.show_edges
        )
        if self.renderer is not None:
            self.renderer(self.rendered)
