import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pingtest.config import settings
from pingtest.routers import ping, system

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Server is running on %s:%d...", settings.host, settings.port)
    yield
    logger.info("Server stopped")


app = FastAPI(title="pingtest", lifespan=lifespan)


@app.exception_handler(StarletteHTTPException)
async def plain_text_http_error(request: Request, exc: StarletteHTTPException):
    # Error bodies are the bare message plus newline, not JSON
    return PlainTextResponse(f"{exc.detail}\n", status_code=exc.status_code, headers=exc.headers)


app.include_router(system.router)
app.include_router(ping.router)
