# /app/main.py

# --- Core FastAPI Imports ---
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

# --- Configuration & Logging ---
from .core import config

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger(__name__)

# --- Application-specific Router Imports ---
from .routers import (
    student_router,
    performance_router,
    prediction_router,
    study_goal_router,
)

# --- Startup Dependencies ---
from .core.security import warn_if_default_secret
from .db.database import init_db
from .services.gemini_service import build_text_generator

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once at startup: tables exist and the single AI client is built.
    init_db()
    warn_if_default_secret()
    app.state.text_generator = build_text_generator()
    yield
    # Runs once at shutdown.
    app.state.text_generator = None

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Student Performance API",
    description="Tracks student performance, predicts grades and builds study plans.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[prediction_router.PREDICTION_SOURCE_HEADER],
)

# --- API Router Inclusion ---
app.include_router(student_router.router, prefix="/api/students", tags=["Students"])
app.include_router(performance_router.router, prefix="/api/performance", tags=["Performance"])
app.include_router(prediction_router.router, prefix="/api/prediction", tags=["Prediction"])
app.include_router(study_goal_router.router, prefix="/api/study-goals", tags=["Study Goals"])

# --- Global Error Handler ---
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Student Performance API is running", "version": app.version}
