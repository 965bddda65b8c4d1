from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from pagesync.api.deps import get_store
from pagesync.core.store import PaginationStore
from pagesync.core.window import compute_window
from pagesync.db.session import get_db
from pagesync.schemas.pagination import PaginationOut, RefreshIn, TraverseIn
from pagesync.sources import COUNTED_MODELS, refresh_from_db

router = APIRouter(prefix="/pagination", tags=["pagination"])


def pagination_to_out(store: PaginationStore) -> PaginationOut:
    state = store.get_state()
    return PaginationOut(
        resource=store.resource,
        state=state,
        window=compute_window(state.page, state.pages),
    )


@router.get("/{resource}", response_model=PaginationOut)
def get_pagination(store: PaginationStore = Depends(get_store)):
    """Current snapshot and the page window to render for it."""
    return pagination_to_out(store)


@router.post("/{resource}/traverse", response_model=PaginationOut)
def traverse(payload: TraverseIn, store: PaginationStore = Depends(get_store)):
    """
    Navigate to a page. Out-of-range pages are clamped; a request for the
    current page changes nothing.
    """
    store.traverse(payload.page)
    return pagination_to_out(store)


@router.post("/{resource}/refresh", response_model=PaginationOut)
def refresh(payload: RefreshIn, store: PaginationStore = Depends(get_store)):
    """Apply a collection size reported by the data source."""
    store.apply_collection_refresh(payload.total_count)
    return pagination_to_out(store)


@router.post("/{resource}/sync", response_model=PaginationOut)
def sync(
    store: PaginationStore = Depends(get_store),
    db: Session = Depends(get_db),
):
    """Count the resource's rows in the database and refresh the store."""
    model = COUNTED_MODELS.get(store.resource)
    if model is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No count source for resource '{store.resource}'",
        )
    refresh_from_db(db, store, model)
    return pagination_to_out(store)
