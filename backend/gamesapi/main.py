"""
Videogames API: CRUD игр, баннеры и Swagger UI на /api-docs.
"""
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import get_config
from .constants import API_DESCRIPTION, API_TITLE, API_VERSION, TAGS
from .routes import router
from .store import GameStore, StoreError, ValidationError

logging.basicConfig(
    level=get_config().log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    if isinstance(exc, ValidationError):
        logger.warning("Validation failed on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    # Нечисловой id в пути ведёт себя как несуществующий
    if any(e.get("loc", ())[:1] == ("path",) for e in errors):
        return JSONResponse(status_code=404, content={"error": "Game not found"})
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ())[1:])
    message = first.get("msg", "Invalid request")
    if field:
        message = f"{field}: {message}"
    logger.warning("Request validation failed on %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


def create_app(store: GameStore | None = None, config=None) -> FastAPI:
    config = config or get_config()
    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description=API_DESCRIPTION,
        openapi_tags=TAGS,
        servers=[{"url": f"http://localhost:{config.port}"}],
        docs_url="/api-docs",
        redoc_url=None,
        openapi_url="/api-docs/openapi.json",
    )
    app.state.store = store if store is not None else GameStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.get("/health", include_in_schema=False)
    def health():
        return {"status": "ok"}

    app.include_router(router)

    # Статические картинки (если каталог есть)
    if config.static_dir.is_dir():
        app.mount(config.static_prefix, StaticFiles(directory=str(config.static_dir)), name="images")
    else:
        logger.info("Static dir %s not found, %s is not served", config.static_dir, config.static_prefix)

    return app


app = create_app()


def run() -> None:
    config = get_config()
    logger.info("API running at http://localhost:%s", config.port)
    logger.info("Docs available at http://localhost:%s/api-docs", config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    run()
