import logging

from app.config import CORS_ALLOW_ORIGINS, DB_AUTO_CREATE, HOUSEWORK_BACKEND, LOG_LEVEL

# Log configuration (before other imports)
# ruff: noqa: E402
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

from contextlib import asynccontextmanager  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from app.api.base import api_router  # noqa: E402
from app.db import engine, init_db  # noqa: E402
from app.db.session import log_pool_stats  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if DB_AUTO_CREATE and HOUSEWORK_BACKEND == "sql":
        await init_db()
    logger.info(f"Housework Backend API started (backend={HOUSEWORK_BACKEND})")
    log_pool_stats("startup")
    yield
    await engine.dispose()


app = FastAPI(
    title="Housework Backend API",
    description="Backend API for recording housework tasks, their term and points",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include all API routes
app.include_router(api_router)


@app.get("/")
def read_root():
    return {
        "message": "Housework Backend API",
        "docs": "/docs",
        "version": "1.0.0"
    }
