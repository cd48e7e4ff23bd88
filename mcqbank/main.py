# FastAPI entry point; builds the question index at startup and mounts the API
# mcqbank/main.py
import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from mcqbank.endpoints import lessons as lessons_router, mcqs as mcqs_router
from mcqbank.exceptions import SourceLoadError
from mcqbank.services.repository import build_index
from mcqbank.services.source_loader import load_source_tree
from mcqbank.utils.config import settings
from mcqbank.utils.logger import logger

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Builds the repository index once before serving; it stays read-only afterwards.
    """
    logger.info("MCQ Practice API starting up...")

    logger.info(f"Loading questions from {settings.mcq_data_dir}...")
    try:
        source = load_source_tree(settings.mcq_data_dir)
    except SourceLoadError as e:
        logger.critical(f"Fatal error loading questions: {e}")
        sys.exit(1) # Exit rather than serve an empty index
    repository = build_index(source)
    app.state.repository = repository

    logger.info(f"Available lessons: {repository.keys()}")
    for record in repository.records():
        logger.info(f"{record.key}: {len(record.questions)} questions")

    logger.info("Startup complete.")
    yield
    logger.info("MCQ Practice API shutting down...")

# --- FastAPI App Initialization ---
app = FastAPI(
    title="MCQ Practice API",
    description="Multiple-choice practice sets by lesson, subject, random draw and finals.",
    version="1.0.0",
    lifespan=lifespan
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Error Bodies ---
# The practice UI expects failures as {"error": message}.
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

# --- API Routers ---
app.include_router(mcqs_router.router, prefix=f"{settings.api_prefix}/mcqs", tags=["MCQs"])
app.include_router(lessons_router.router, prefix=f"{settings.api_prefix}/lessons", tags=["Lessons"])

# --- Browser UI ---
if os.path.isdir(settings.static_dir):
    # Mounted last so API routes take precedence.
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
else:
    @app.get("/")
    async def root():
        return {"message": "Welcome to the MCQ Practice API"}
