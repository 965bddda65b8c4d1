from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "Pagination Sync Service",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }
