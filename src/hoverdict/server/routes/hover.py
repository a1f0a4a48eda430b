"""
Hover routes: /api/hover, /api/resolve
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from hoverdict.core.hover import provide_hover
from hoverdict.core.resolve import resolve
from hoverdict.core.store import DictionaryStore
from hoverdict.server.deps import get_store


router = APIRouter(prefix="/api", tags=["hover"])


class HoverRequest(BaseModel):
    line: str
    character: int


@router.post("/hover")
async def hover(req: HoverRequest, store: DictionaryStore = Depends(get_store)):
    """Hover content for the word at `character` in `line`, or null."""
    result = provide_hover(store, req.line, req.character)
    if result is None:
        return None
    return result.to_dict()


@router.get("/resolve")
async def resolve_text(text: str, offset: int = 0, store: DictionaryStore = Depends(get_store)):
    """Candidate keys for `text`, in the order they are tried."""
    return {
        "candidates": [
            {"key": c.key, "display": c.display, "strategy": c.strategy, "found": c.key in store}
            for c in resolve(text, offset)
        ]
    }
