"""
ptstemmer - FastAPI application for Portuguese stemming

Endpoints:
- GET  /             service info
- GET  /health       health check
- POST /v1/stem      stem a batch of words
- POST /v1/tokenize  text → stemmed index terms
- POST /v1/index     chunks → stemmed term frequencies

The stemmer is built once at import and shared read-only by all requests.
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Dict, List

# Load environment variables from .env.local (local dev) or .env (production)
from dotenv import load_dotenv

env_local = Path(__file__).parent.parent / ".env.local"
env_file = Path(__file__).parent.parent / ".env"

if env_local.exists():
    load_dotenv(env_local, override=True)
elif env_file.exists():
    load_dotenv(env_file, override=True)

# Configure logging: console (brief) + file (detailed)
from ptstemmer.logging_config import setup_logging

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
console_level = getattr(logging, log_level, logging.INFO)
setup_logging(
    log_file=os.getenv("LOG_FILE", "logs/ptstemmer.log"),
    console_level=console_level,
    file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
)

logger = logging.getLogger(__name__)


from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import __version__
from .stemming import build_stem_index, get_stemmer, tokenize

# Configuration from environment variables
PORT = int(os.getenv("PORT", "8080"))

APP_VERSION = __version__
APP_START_TIME = datetime.utcnow().isoformat() + "Z"

MAX_WORDS_PER_REQUEST = 1000


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup/shutdown; the stemmer itself is built at import"""
    stemmer = get_stemmer()
    logger.info(
        f"Portuguese stemmer ready (step1={len(stemmer.step1_suffixes)}, "
        f"step2={len(stemmer.step2_suffixes)} suffixes)"
    )

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title="ptstemmer API",
    description="Snowball stemming for Portuguese search indexing",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure properly in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float


class StemRequest(BaseModel):
    words: List[str] = Field(
        ...,
        description="Words to stem (not lowercased by the stemmer)",
        min_length=1,
        max_length=MAX_WORDS_PER_REQUEST,
    )


class StemItem(BaseModel):
    word: str
    stem: str


class StemResponse(BaseModel):
    stems: List[StemItem]
    count: int


class TokenizeRequest(BaseModel):
    text: str = Field(..., description="Text to tokenize")


class TokenizeResponse(BaseModel):
    tokens: List[str]
    count: int


class IndexRequest(BaseModel):
    chunks: List[str] = Field(..., description="Text chunks of one document", min_length=1)


class IndexResponse(BaseModel):
    term_frequencies: Dict[str, int]
    unique_terms: int


# Routes
@app.get("/", response_model=dict)
async def root():
    """Root endpoint"""
    return {
        "service": "ptstemmer API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    start_time = datetime.fromisoformat(APP_START_TIME.rstrip('Z'))
    uptime = (datetime.utcnow() - start_time).total_seconds()

    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        started_at=APP_START_TIME,
        uptime_seconds=round(uptime, 2),
    )


@app.post("/v1/stem", response_model=StemResponse)
async def stem_words(request: StemRequest):
    """
    Stem a batch of words

    Example:
        POST /v1/stem
        {
            "words": ["ajudado", "abafaram"]
        }
    """
    stemmer = get_stemmer()
    stems = [StemItem(word=word, stem=stemmer.stem(word)) for word in request.words]
    logger.debug(f"Stemmed {len(stems)} words")

    return StemResponse(stems=stems, count=len(stems))


@app.post("/v1/tokenize", response_model=TokenizeResponse)
async def tokenize_text(request: TokenizeRequest):
    """
    Tokenize text into stemmed index terms

    Example:
        POST /v1/tokenize
        {
            "text": "A ajuda foi ajudada pelos meninos"
        }
    """
    tokens = tokenize(request.text)
    return TokenizeResponse(tokens=tokens, count=len(tokens))


@app.post("/v1/index", response_model=IndexResponse)
async def index_chunks(request: IndexRequest):
    """Aggregate stemmed term frequencies over document chunks"""
    index = build_stem_index(request.chunks)
    term_frequencies = index["term_frequencies"]

    return IndexResponse(
        term_frequencies=term_frequencies,
        unique_terms=len(term_frequencies),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ptstemmer.main:app",
        host="0.0.0.0",
        port=PORT,
        reload=True,  # Development only
    )
