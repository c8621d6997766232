from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from common.logger import setup_logger
from common.middleware.request_trace import RequestTraceMiddleware
from common.mongo.client import close_client

from .api.health import router as health_router
from .api.routes import api_router
from .config import get_config


@asynccontextmanager
async def lifespan(app: FastAPI):  # pragma: no cover - framework hook
    yield
    close_client()


def create_app() -> FastAPI:
    setup_logger()
    app = FastAPI(
        title="Fritter Bookmark Service",
        version="0.1.0",
        lifespan=lifespan,
    )

    # 공통 Request/Span ID 로그 미들웨어
    app.add_middleware(RequestTraceMiddleware)

    app.include_router(health_router, tags=["health"])
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


def main() -> None:
    import uvicorn

    config = get_config()
    uvicorn.run(
        "bookmark_service.app.main:app",
        host="0.0.0.0",
        port=config.port,
        reload=False,
        access_log=False,
    )


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    main()
