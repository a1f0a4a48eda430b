"""
Word routes: /api/words, /api/store
"""

from fastapi import APIRouter, Depends, HTTPException

from hoverdict.core.format import render_doc
from hoverdict.core.store import DictionaryStore
from hoverdict.server.deps import get_store


router = APIRouter(prefix="/api", tags=["words"])


@router.get("/words/{word}")
async def get_word(word: str, store: DictionaryStore = Depends(get_store)):
    """Look up a single word."""
    record = store.lookup(word)
    if record is None:
        raise HTTPException(status_code=404, detail="Word not found")
    return {
        "word": word,
        **record.to_dict(),
        "markdown": render_doc(word, record),
    }


@router.get("/store")
async def store_info(store: DictionaryStore = Depends(get_store)):
    """Dictionary store status."""
    return {
        "initialized": store.initialized,
        "size": len(store),
        "path": str(store.path) if store.path else None,
    }
