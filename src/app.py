"""Groove FastAPI application.

Music marketplace web server that processes commands synchronously via HTTP.
Every request runs inside the groove domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay and the logging level.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from groove.domain import groove  # noqa: E402
from groove.utils.logging import request_context  # noqa: E402

groove.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Groove API",
    description="Music marketplace: accounts, catalogue, carts, orders and PayPal payments",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the groove domain context and bind request ids for logging."""
    with request_context(
        request.method,
        request.url.path,
        request_id=request.headers.get("x-request-id"),
    ) as request_id:
        with groove.domain_context():
            response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


# ---------------------------------------------------------------------------
# Error handling and routers
# ---------------------------------------------------------------------------
from groove.api.errors import setup_exception_handlers  # noqa: E402
from groove.catalogue.api import album_router, artist_router, studio_router, track_router  # noqa: E402
from groove.identity.api.routes import router as account_router  # noqa: E402
from groove.ordering.api import cart_router, library_router  # noqa: E402
from groove.payments.api.routes import payment_router  # noqa: E402

setup_exception_handlers(app)

app.include_router(account_router)
app.include_router(library_router)
app.include_router(artist_router)
app.include_router(studio_router)
app.include_router(track_router)
app.include_router(album_router)
app.include_router(cart_router)
app.include_router(payment_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": {"name": groove.name}})
