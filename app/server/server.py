from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.rate_limits import get_limiter, setup_rate_limiter
from api.router import api_router
from infrastructure.configuration import settings
from infrastructure.logging import (
    bind_request_context,
    get_correlation_id,
    get_module_logger,
)
from server.lifespan import lifespan

logger = get_module_logger()

CORRELATION_ID_HEADER = "X-Correlation-ID"

handler = FastAPI(lifespan=lifespan)
setup_rate_limiter(handler)
limiter = get_limiter()


allow_origins = (
    ["*"]
    if settings.is_production
    else [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@handler.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Bind a correlation id and request metadata to every log entry."""
    with bind_request_context(
        correlation_id=request.headers.get(CORRELATION_ID_HEADER),
        request_path=request.url.path,
        request_method=request.method,
    ):
        correlation_id = get_correlation_id()
        response = await call_next(request)
    response.headers[CORRELATION_ID_HEADER] = correlation_id
    return response


handler.include_router(api_router)
