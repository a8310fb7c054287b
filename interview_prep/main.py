# FastAPI entry point; exposes the spreadsheet parser and the model-backed flows
# interview_prep/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from interview_prep.endpoints import (
    upload as upload_router,
    assessment as assessment_router,
    learning as learning_router,
    mcq as mcq_router,
    audio as audio_router,
)
from interview_prep.utils.config import settings
from interview_prep.utils.exceptions import AppError, app_error_handler, global_exception_handler
from interview_prep.utils.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events.
    """
    logger.info("Interview Prep API starting up...")
    logger.info(f"LLM provider: {settings.llm_provider}; TTS model: {settings.tts_model_name}")
    if settings.llm_provider == "google" and not settings.google_api_key:
        logger.warning("GOOGLE_API_KEY is not set; model-backed endpoints will fail until it is configured.")
    logger.info("Startup complete.")
    yield
    logger.info("Interview Prep API shutting down...")


# --- FastAPI App Initialization ---
app = FastAPI(
    title="Interview Prep API",
    description="Upload interview questions per role, get answers graded and learning material generated.",
    version="0.1.0",
    lifespan=lifespan
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Exception Handlers ---
app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(Exception, global_exception_handler)

# --- API Routers ---
app.include_router(upload_router.router, prefix="/upload", tags=["Upload"])
app.include_router(assessment_router.router, prefix="/assessment", tags=["Assessment"])
app.include_router(learning_router.router, prefix="/learning", tags=["Learning"])
app.include_router(mcq_router.router, prefix="/mcq", tags=["Practice"])
app.include_router(audio_router.router, prefix="/audio", tags=["Audio"])


# --- Root Endpoint ---
@app.get("/")
async def root():
    return {"message": "Welcome to the Interview Prep API"}
