"""
Quiz Service Server

FastAPI server with:
- Quiz generation from topic or extracted text (chat completion API)
- Strict validation of the model reply
- Submission grading and history (AgentFS KV store)
"""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import app_state
from quiz.router import router as quiz_router

# =============================================================================
# CONFIGURATION
# =============================================================================

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("server")


def get_allowed_origins() -> list[str]:
    """CORS origins from ALLOWED_ORIGINS (comma separated)."""
    raw = os.getenv("ALLOWED_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]


# =============================================================================
# FASTAPI APP
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage app lifecycle."""
    logger.info("Starting Quiz Service...")
    yield
    await app_state.close()
    logger.info("Quiz Service stopped")


app = FastAPI(
    title="Quiz Service",
    description="Quiz generation, grading and submission history",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quiz_router)


# =============================================================================
# HEALTH ENDPOINTS
# =============================================================================


@app.get("/")
async def root():
    return {"status": "ok", "service": "quiz"}


@app.get("/health")
async def health():
    cfg = app_state.get_config()
    return {
        "status": "healthy",
        "completion_model": cfg.completion_model,
        "question_count": cfg.question_count,
    }


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8001")))
