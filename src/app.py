"""ShopWise FastAPI application.

Multi-domain web server that processes commands synchronously via HTTP.
Each request is wrapped in the correct domain context based on URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV selects the config overlay in each domain.toml.
from catalogue.domain import catalogue  # noqa: E402
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from identity.domain import identity  # noqa: E402
from ordering.domain import ordering  # noqa: E402
from protean.integrations.fastapi import register_exception_handlers
from shared.logging import add_context, clear_context

identity.init()
catalogue.init()
ordering.init()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/auth": identity,
    "/profiles": identity,
    "/products": catalogue,
    "/recommendations": catalogue,
    "/orders": ordering,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="ShopWise API",
    description="Shoe storefront: catalogue, identity and ordering domains, plus the shopping assistant",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    clear_context()
    add_context(method=request.method, path=request.url.path)
    if domain is not None:
        add_context(domain=domain.name)
        with domain.domain_context():
            response = await call_next(request)
        return response
    # No domain match: pass through (health check, chat, docs)
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from assistant.chat import router as chat_router  # noqa: E402
from catalogue.api import product_router, recommendation_router  # noqa: E402
from identity.api import auth_router, profile_router  # noqa: E402
from ordering.api import order_router  # noqa: E402

app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(product_router)
app.include_router(recommendation_router)
app.include_router(order_router)
app.include_router(chat_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "identity": {"name": identity.name},
                "catalogue": {"name": catalogue.name},
                "ordering": {"name": ordering.name},
            },
        }
    )


@app.get("/health/database")
async def database_health():
    """Row counts per table; a failing domain turns the whole check into a 500."""
    from shared.db import table_counts

    tables = {}
    try:
        for domain in (catalogue, identity, ordering):
            tables.update(table_counts(domain))
    except Exception as exc:  # noqa: BLE001
        return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})
    return JSONResponse(content={"success": True, "tables": tables})
