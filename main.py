import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.datastructures import Headers
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from errors import QuestionsError

# Routers
from routers.health import router as health_router
from routers.questions import router as questions_router
from store import Store

logger = logging.getLogger("questions-api")
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

CORS_ALLOW_ORIGINS = [
    o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()
]


class ForbiddingCORSMiddleware(CORSMiddleware):
    """CORSMiddleware, but a rejected preflight is a 403 instead of a 400."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code == 400:
            logger.info("cors preflight rejected: %s", response.body.decode())
            response.status_code = 403
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A bad seed file raises here and the app never starts serving.
    app.state.store = Store.from_file()
    yield


app = FastAPI(title="Questions API", lifespan=lifespan)

app.add_middleware(
    ForbiddingCORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["content-type"],
)


# --- Error -> response mapping ------------------------------------------------------


@app.exception_handler(QuestionsError)
async def questions_error_handler(request: Request, exc: QuestionsError):
    logger.info("%s %s rejected (%s): %s", request.method, request.url.path, exc.kind.value, exc)
    return PlainTextResponse(str(exc), status_code=416)


@app.exception_handler(RequestValidationError)
async def body_error_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    logger.info("%s %s bad body: %s", request.method, request.url.path, problems)
    return PlainTextResponse(f"Request body deserialize error: {problems}", status_code=416)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Unknown path and wrong method on a known path look the same to clients.
    if exc.status_code in (404, 405):
        return PlainTextResponse("Route not found", status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


# Register routers
app.include_router(questions_router)  # /questions
app.include_router(health_router)  # /health


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "3030")))
