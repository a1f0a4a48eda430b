"""
hoverdict API Server.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from rich.console import Console
from rich.table import Table

from hoverdict.config import STORAGE_DIR
from hoverdict.core.dataset import ensure_dataset
from hoverdict.core.store import DictionaryStore
from hoverdict.server.deps import get_store

# Import routers
from hoverdict.server.routes import hover, words


def print_routes(app: FastAPI, store: DictionaryStore):
    table = Table(title=f"hoverdict API ({len(store)} words)", title_justify="left")
    table.add_column("Method")
    table.add_column("Path")
    table.add_column("Handler", style="dim")
    
    routes = sorted(
        (route for route in app.routes if isinstance(route, APIRoute)),
        key=lambda r: r.path,
    )
    for route in routes:
        for method in sorted(route.methods - {"HEAD", "OPTIONS"}):
            table.add_row(method, route.path, route.name)
    
    Console().print(table)


def init_store(storage_dir=STORAGE_DIR):
    """Download the dataset if needed, then load it before serving."""
    path = ensure_dataset(storage_dir)
    store = get_store()
    if store.initialize(path):
        print(f"✓ Loaded {len(store)} words from {path}")
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = init_store()
    print_routes(app, store)
    yield


app = FastAPI(title="hoverdict API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(hover.router)
app.include_router(words.router)


@app.get("/")
async def root():
    return {"name": "hoverdict API", "version": "0.1.0"}
