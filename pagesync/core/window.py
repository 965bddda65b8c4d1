from pagesync.schemas.pagination import PageWindow

# Pages shown before the current one, and the maximum number of links.
WINDOW_LOOKBACK = 7
WINDOW_SPAN = 15
# Collections with at least this many pages get first/last jumps.
EDGE_THRESHOLD = 5

_EMPTY = PageWindow()


def compute_window(page: int, pages: int) -> PageWindow:
    """
    Map the current page and page count to the links a pager renders.

    The window starts up to WINDOW_LOOKBACK pages before ``page`` and runs for
    at most WINDOW_SPAN entries, so the current page sits near the start.
    When first/last jumps are shown (``offset == 1``) the first and last page
    are left out of the window.

      compute_window(0, 3)   -> indices (0, 1, 2), offset 0
      compute_window(4, 5)   -> indices (1, 2, 3), offset 1
      compute_window(20, 40) -> indices 13..27,   offset 1
    """
    if pages <= 1:
        return _EMPTY

    offset = 1 if pages >= EDGE_THRESHOLD else 0
    start = max(offset, page - WINDOW_LOOKBACK)
    end = min(pages - offset, start + WINDOW_SPAN)

    return PageWindow(
        indices=tuple(range(start, end)),
        start=start,
        end=end,
        offset=offset,
        show_edges=offset == 1,
        can_go_back=page > 0,
        can_go_forward=page < pages - 1,
    )
