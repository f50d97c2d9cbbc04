"""FastAPI application for the Todo List."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse

from todolist import __version__
from todolist.api.schemas import (
    CreateTodoRequest,
    HealthResponse,
    PriorityListResponse,
    PriorityOption,
    TodoListResponse,
    TodoResponse,
)
from todolist.config import Settings, configure_logging, get_settings
from todolist.core.models import Priority
from todolist.core.store import Snapshot, TodoStore

logger = structlog.get_logger()


def _log_snapshot(snapshot: Snapshot) -> None:
    logger.debug(
        "snapshot_published",
        total=len(snapshot),
        completed=sum(1 for item in snapshot if item.is_completed),
    )


def _sse_frame(snapshot: Snapshot) -> bytes:
    payload = TodoListResponse.from_snapshot(snapshot).model_dump_json()
    return f"data: {payload}\n\n".encode("utf-8")


async def snapshot_events(store: TodoStore) -> AsyncIterator[bytes]:
    """Yield the current snapshot, then one frame per published snapshot."""
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[Snapshot] = asyncio.Queue()

    def on_change(snapshot: Snapshot) -> None:
        loop.call_soon_threadsafe(queue.put_nowait, snapshot)

    unsubscribe = store.subscribe(on_change)
    try:
        yield _sse_frame(store.snapshot())
        while True:
            yield _sse_frame(await queue.get())
    finally:
        unsubscribe()


def get_store(request: Request) -> TodoStore:
    return request.app.state.store


def create_app(store: TodoStore | None = None, settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings)
        unsubscribe = app.state.store.subscribe(_log_snapshot)
        logger.info("store_created", items=len(app.state.store))
        yield
        unsubscribe()
        logger.info("store_discarded", items=len(app.state.store))

    app = FastAPI(
        title="Todo List API",
        description="A single-screen to-do list sorted by priority",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else TodoStore()
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health", response_model=HealthResponse)
    async def health(store: TodoStore = Depends(get_store)) -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, items=len(store))

    @app.get("/api/priorities", response_model=PriorityListResponse)
    async def list_priorities() -> PriorityListResponse:
        return PriorityListResponse(
            priorities=[
                PriorityOption(value=p, label=p.label, color=p.color) for p in Priority
            ],
            default=settings.default_priority,
        )

    @app.get("/api/todos", response_model=TodoListResponse)
    async def list_todos(store: TodoStore = Depends(get_store)) -> TodoListResponse:
        return TodoListResponse.from_snapshot(store.snapshot())

    @app.post("/api/todos", response_model=TodoListResponse, status_code=201)
    async def create_todo(
        body: CreateTodoRequest, store: TodoStore = Depends(get_store)
    ) -> TodoListResponse:
        store.add(body.title, body.priority or settings.default_priority)
        return TodoListResponse.from_snapshot(store.snapshot())

    @app.get("/api/todos/events")
    async def todo_events(store: TodoStore = Depends(get_store)) -> StreamingResponse:
        return StreamingResponse(
            snapshot_events(store),
            media_type="text/event-stream",
            headers={"Cache-Control": "no-cache"},
        )

    @app.patch("/api/todos/{todo_id}/toggle", response_model=TodoResponse)
    async def toggle_todo(todo_id: int, store: TodoStore = Depends(get_store)) -> TodoResponse:
        todo = store.toggle_id(todo_id)
        if todo is None:
            raise HTTPException(status_code=404, detail="Todo not found")
        return TodoResponse.from_item(todo)

    @app.delete("/api/todos/{todo_id}", status_code=204)
    async def delete_todo(todo_id: int, store: TodoStore = Depends(get_store)):
        if store.delete_id(todo_id) is None:
            raise HTTPException(status_code=404, detail="Todo not found")

    return app


app = create_app()
