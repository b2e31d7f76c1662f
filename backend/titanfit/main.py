"""
TitanFit API - Main Application
FastAPI backend for coaches and their clients: diets, workouts, food and weight logging.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from .config import settings
from .database import engine, Base, SessionLocal
from .routers import auth, clients, workouts, food, weights, measurements, progress, library
from .storage import SqlKeyValueStore
from .store import FitnessStore
# Import models to ensure they're registered with SQLAlchemy before create_all
from . import models  # noqa: F401

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    print("=" * 60)
    print(f"🚀 {settings.app_name} v{settings.app_version}")
    if settings.git_commit:
        print(f"📦 Git Commit: {settings.git_commit[:8]}")
    if settings.build_date:
        print(f"🕐 Build Date: {settings.build_date}")
    print("=" * 60)

    Base.metadata.create_all(bind=engine)

    store = FitnessStore(SqlKeyValueStore(SessionLocal), settings.storage_key)
    store.initialize(settings.seed_coach_username, settings.seed_coach_password)
    app.state.store = store
    logger.info(f"Store ready: {len(store.get_clients())} clients")

    yield
    # Shutdown
    store.flush()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Coach and client fitness tracking: diets, workouts, food and weight logs",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(clients.router)
app.include_router(workouts.router)
app.include_router(food.router)
app.include_router(weights.router)
app.include_router(measurements.router)
app.include_router(progress.router)
app.include_router(library.router)


@app.get("/")
def root():
    """Root endpoint - API status."""
    response = {
        "message": "Welcome to TitanFit API",
        "version": settings.app_version,
        "status": "healthy",
        "docs": "/docs"
    }
    if settings.git_commit:
        response["git_commit"] = settings.git_commit[:8]
    if settings.build_date:
        response["build_date"] = settings.build_date
    return response


@app.get("/health")
def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}


@app.get("/api/version")
def version():
    """Version information endpoint."""
    response = {
        "app_name": settings.app_name,
        "version": settings.app_version,
    }
    if settings.git_commit:
        response["git_commit"] = settings.git_commit
        response["git_commit_short"] = settings.git_commit[:8]
    if settings.build_date:
        response["build_date"] = settings.build_date
    return response


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("titanfit.main:app", host="0.0.0.0", port=8000, reload=True)
