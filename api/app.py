"""HTTP API for creating, advancing and rendering named Life boards."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Annotated, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, RedirectResponse, Response
from pydantic import BaseModel, Field
from starlette.concurrency import run_in_threadpool

from infra.logger import get_logger
from infra.settings import Settings
from life import BoardError, RenderError, SVGOptions, TextOptions
from life_service import BoardNotFound, InvalidBoardName, LifeService, split_extension
from store import BoardAlreadyExists, BoardStore, StoreError, create_store

logger = get_logger(__name__)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store",
    "Expires": "Thu, 01 Jan 1970 00:00:00 GMT",
}

Symbol = Optional[Annotated[str, Field(min_length=1, max_length=1)]]


class SymbolParams(BaseModel):
    alive: Symbol = None
    dead: Symbol = None
    separator: Symbol = None

    def text_options(self) -> TextOptions:
        return TextOptions.from_optional(self.alive, self.dead, self.separator)


class RenderParams(SymbolParams):
    next: bool = False
    cell_size: Optional[int] = Field(default=None, ge=1)
    stroke_width: Optional[int] = Field(default=None, ge=0)
    stroke_color: Optional[str] = None
    fill_color: Optional[str] = None

    def svg_options(self) -> SVGOptions:
        return SVGOptions.from_optional(
            self.cell_size, self.stroke_width, self.stroke_color, self.fill_color
        )


def get_service(request: Request) -> LifeService:
    return LifeService(request.app.state.store)


def create_app(store: BoardStore | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the application around an explicit store handle.

    Args:
        store: Board store to serve; built from settings when omitted
        settings: Configuration; read from the environment when omitted
    """
    settings = settings or Settings.from_env()
    if store is None:
        store = create_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.store.close()

    # Underscore paths cannot collide with board names
    app = FastAPI(
        title="Game of Life",
        lifespan=lifespan,
        docs_url="/_docs",
        redoc_url="/_redoc",
        openapi_url="/_openapi.json",
    )
    app.state.store = store
    app.state.settings = settings

    # Boards are embedded from arbitrary origins (e.g. SVG in a README)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def no_cache(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(NO_CACHE_HEADERS)
        return response

    @app.get("/", include_in_schema=False)
    def index():
        return RedirectResponse(settings.homepage_url)

    @app.get("/favicon.ico", include_in_schema=False)
    def favicon():
        raise HTTPException(404, "not found")

    @app.get("/_ping", response_class=PlainTextResponse)
    def ping():
        return "pong"

    @app.get("/{name}")
    def render(
        name: str,
        params: Annotated[RenderParams, Query()],
        service: LifeService = Depends(get_service),
    ):
        name, fmt = split_extension(name)
        try:
            board = service.view(name, advance=params.next)
            rendered = service.render(board, fmt, params.text_options(), params.svg_options())
        except BoardNotFound as exc:
            raise HTTPException(404, str(exc)) from exc
        except BoardError as exc:
            raise HTTPException(400, str(exc)) from exc
        except (StoreError, RenderError) as exc:
            logger.exception("Failed to render board %s", name)
            raise HTTPException(500, str(exc)) from exc

        headers = {
            "ETag": str(board.generation),
            "x-life-generation": str(board.generation),
            "x-life-delta": str(board.delta),
            "x-life-terminal": str(board.terminal()).lower(),
        }
        return Response(rendered.content, media_type=rendered.media_type, headers=headers)

    @app.post("/{name}", status_code=201, response_class=PlainTextResponse)
    async def create(
        name: str,
        request: Request,
        params: Annotated[SymbolParams, Query()],
        service: LifeService = Depends(get_service),
    ):
        try:
            seed = (await request.body()).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise HTTPException(400, "seed must be UTF-8 text") from exc

        try:
            board = await run_in_threadpool(service.create, name, seed, params.text_options())
        except (InvalidBoardName, BoardError) as exc:
            raise HTTPException(400, str(exc)) from exc
        except BoardAlreadyExists as exc:
            raise HTTPException(409, str(exc)) from exc
        except StoreError as exc:
            logger.exception("Failed to create board %s", name)
            raise HTTPException(500, str(exc)) from exc

        return str(board)

    return app
