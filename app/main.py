# app/main.py
import json
import uuid
from contextlib import asynccontextmanager
from typing import Any, Optional

import structlog
from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import Settings, settings
from .database import SEED_MENU, InMemoryMenuStore, MenuStore
from .errors import MenuItemNotFound, MenuValidationError
from .log import configure_logging, request_id_ctx
from .sdk import (
    create_menu_item_logic,
    delete_menu_item_logic,
    get_menu_item_logic,
    list_menu_logic,
    reset_all_logic,
    update_menu_item_logic,
)

logger = structlog.get_logger(__name__)

LOGGED_BODY_METHODS = ("POST", "PUT")


def build_store(cfg: Settings) -> MenuStore:
    seed = SEED_MENU if cfg.seed_data else []
    return InMemoryMenuStore(seed=seed, id_strategy=cfg.id_strategy)


def get_store(request: Request) -> MenuStore:
    return request.app.state.store


def _decode_body(raw: bytes) -> Any:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return raw.decode("utf-8", errors="replace")


def _error_field(error) -> str:
    # a JSON decode error is located at a character offset inside the body
    if error.get("type") == "json_invalid":
        return "body"
    parts = [str(p) for p in error.get("loc", ()) if p != "body"]
    return ".".join(parts) or "body"


def create_app(store: Optional[MenuStore] = None, app_settings: Optional[Settings] = None) -> FastAPI:
    cfg = app_settings or settings
    configure_logging(cfg.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = app.state.store is None
        if owned:
            app.state.store = build_store(cfg)
        logger.info("menu_store_ready", items=len(app.state.store.list_all()), id_strategy=cfg.id_strategy)
        try:
            yield
        finally:
            if owned:
                app.state.store.close()
                app.state.store = None
            logger.info("menu_store_closed")

    app = FastAPI(title=cfg.app_name, lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------------------------
    # Middleware
    # ---------------------------
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        fields = {"method": request.method, "path": path}
        if request.method in LOGGED_BODY_METHODS:
            fields["body"] = _decode_body(await request.body())
        logger.info("incoming_request", **fields)
        return await call_next(request)

    @app.middleware("http")
    async def add_request_context(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        token = request_id_ctx.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_ctx.reset(token)
        response.headers["x-request-id"] = request_id
        return response

    # ---------------------------
    # Error handlers
    # ---------------------------
    @app.exception_handler(MenuValidationError)
    async def menu_validation_handler(request: Request, exc: MenuValidationError):
        logger.warning("menu_validation_failed", path=request.url.path, errors=exc.errors)
        return JSONResponse(status_code=400, content={"errors": exc.errors})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [{"field": _error_field(e), "message": e.get("msg", "Invalid value")} for e in exc.errors()]
        logger.warning("request_validation_failed", path=request.url.path, errors=errors)
        return JSONResponse(status_code=400, content={"errors": errors})

    @app.exception_handler(MenuItemNotFound)
    async def not_found_handler(request: Request, exc: MenuItemNotFound):
        logger.warning("menu_item_not_found", path=request.url.path, item_id=str(exc.item_id))
        return JSONResponse(status_code=404, content={"message": "Menu item not found"})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("unhandled_exception", path=request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal Server Error"})

    # ---------------------------
    # Routes
    # ---------------------------
    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Restaurant API is running!"

    @app.get("/api/menu")
    async def list_menu(store: MenuStore = Depends(get_store)):
        return list_menu_logic(store)

    @app.get("/api/menu/{item_id}")
    async def get_menu_item(item_id: str, store: MenuStore = Depends(get_store)):
        return get_menu_item_logic(store, item_id)

    @app.post("/api/menu", status_code=201)
    async def create_menu_item(payload: Any = Body(default=None), store: MenuStore = Depends(get_store)):
        return create_menu_item_logic(store, payload)

    @app.put("/api/menu/{item_id}")
    async def update_menu_item(item_id: str, payload: Any = Body(default=None), store: MenuStore = Depends(get_store)):
        return update_menu_item_logic(store, item_id, payload)

    @app.delete("/api/menu/{item_id}")
    async def delete_menu_item(item_id: str, store: MenuStore = Depends(get_store)):
        return delete_menu_item_logic(store, item_id)

    # ---------------------------
    # Utility: reset (for tests/demo)
    # ---------------------------
    @app.post("/reset")
    async def reset_all(store: MenuStore = Depends(get_store)):
        return reset_all_logic(store)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
