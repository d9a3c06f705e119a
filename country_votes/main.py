# main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import config
from .country_api import CountryClient
from .errors import ValidationError, VoteAppError
from .routes.country_routes import router as country_router
from .routes.vote_routes import vote_router
from .storage import VoteStore

logger = logging.getLogger(__name__)


def create_app(
    db_path: Optional[str] = None,
    api_url: Optional[str] = None,
    http_client: Optional[httpx.Client] = None,
) -> FastAPI:
    """
    Build the API. The vote store and country client live on app.state,
    so tests (or a second app in the same process) can point at their own
    file and upstream.
    """
    logging.basicConfig(level=config.LOG_LEVEL)

    owns_client = http_client is None
    if owns_client:
        http_client = httpx.Client(timeout=config.API_TIMEOUT)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Votes stored in {app.state.vote_store.path}")
        yield
        if owns_client:
            http_client.close()

    app = FastAPI(title="Country Votes API", lifespan=lifespan)
    app.state.vote_store = VoteStore(db_path or config.DB_PATH)
    app.state.country_client = CountryClient(api_url or config.API_URL, http_client)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(VoteAppError)
    async def vote_app_error_handler(request: Request, exc: VoteAppError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # the only request body is a vote, so a malformed one is missing data
        error = ValidationError()
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.errors()}")
        return JSONResponse(status_code=error.status_code, content={"error": error.message})

    app.include_router(country_router)
    app.include_router(vote_router)

    # --- General Endpoints ---

    @app.get("/", tags=["Root"])
    def read_root():
        return {"message": "Welcome to the Country Votes API"}

    @app.get("/health", tags=["Root"])
    def health_check():
        return {"status": "healthy", "database": app.state.vote_store.path}

    @app.post("/createDB", tags=["Root"])
    def create_db():
        """Create the vote file, wiping any votes already in it."""
        app.state.vote_store.reset()
        return {"message": "Database successfully created"}

    return app


def run():
    uvicorn.run("country_votes.main:create_app", factory=True, host="0.0.0.0", port=config.PORT, log_level="info")


if __name__ == "__main__":
    run()
