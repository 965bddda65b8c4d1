from fastapi import APIRouter, Depends

from pagesync.api.deps import get_registry
from pagesync.core.registry import StoreRegistry

router = APIRouter(tags=["health"])


@router.get("/health")
def health(registry: StoreRegistry = Depends(get_registry)):
    return {"status": "ok", "resources": registry.resources}
