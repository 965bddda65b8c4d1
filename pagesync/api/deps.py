from fastapi import Depends, HTTPException, Request, status

from pagesync.core.errors import UnknownResourceError
from pagesync.core.registry import StoreRegistry
from pagesync.core.store import PaginationStore


def get_registry(request: Request) -> StoreRegistry:
    return request.app.state.registry


def get_store(
    resource: str,
    registry: StoreRegistry = Depends(get_registry),
) -> PaginationStore:
    try:
        return registry.get(resource)
    except UnknownResourceError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
