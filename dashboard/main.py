# dashboard/main.py

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from starlette.middleware.sessions import SessionMiddleware

from dashboard.actions import StoreMutationError
from dashboard.api.auth import router as auth_router
from dashboard.api.customers import router as customers_router
from dashboard.api.invoices import router as invoices_router
from dashboard.cache import ViewCache
from dashboard.config import DEFAULT_SESSION_SECRET, LOG_LEVEL, SESSION_SECRET
from dashboard.db.engine import get_engine

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


async def store_mutation_failed(request: Request, exc: StoreMutationError) -> JSONResponse:
    # escalated deletes land here instead of in the submitting form
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse({"detail": str(exc)}, status_code=500)


def create_app(
    engine: Optional[Engine] = None,
    cache: Optional[ViewCache] = None,
    session_secret: str = SESSION_SECRET,
) -> FastAPI:
    if session_secret == DEFAULT_SESSION_SECRET:
        logger.warning(
            "SESSION_SECRET is not set; session cookies are signed with the development default"
        )

    app = FastAPI(
        title="Invoice Dashboard",
        version="0.1.0",
    )

    app.state.engine = engine if engine is not None else get_engine()
    app.state.cache = cache if cache is not None else ViewCache()

    app.add_middleware(SessionMiddleware, secret_key=session_secret)
    app.add_exception_handler(StoreMutationError, store_mutation_failed)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(auth_router)
    app.include_router(customers_router)
    app.include_router(invoices_router)

    return app


app = create_app()
