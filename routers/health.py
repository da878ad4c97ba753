# questions-api/routers/health.py
from fastapi import APIRouter, Depends

from deps.store import get_store
from store import Store

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(store: Store = Depends(get_store)):
    return {"ok": True, "count": await store.count()}
