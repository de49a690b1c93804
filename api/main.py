from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import find_dotenv, load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from core import db
from core.app_logging import configure_logging
from foods import router as foods_router

HOST = "127.0.0.1"
PORT = 3000

logger = logging.getLogger("main")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Open the DB pool once per process; a StartupError aborts boot.
    app.state.pool = await db.create_pool()
    try:
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None


async def storage_error_handler(_: Request, exc: db.StorageError) -> PlainTextResponse:
    logger.error("Storage operation failed: %s", exc)
    return PlainTextResponse(str(exc), status_code=500)


def create_app() -> FastAPI:
    load_dotenv(find_dotenv(usecwd=True))
    configure_logging()
    app = FastAPI(lifespan=lifespan)
    app.add_exception_handler(db.StorageError, storage_error_handler)
    app.include_router(foods_router.router, tags=["foods"])
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.debug("listening on %s:%s", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)
