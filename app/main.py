# app/main.py

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.exceptions import SummarizerExceptionHandler, UpstreamTransportError
from app.routers import summarize
from app.settings import settings_cache


VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings_cache.load()
    if not settings_cache.huggingface_api_key:
        logger.warning("HUGGINGFACE_API_KEY is not set; upstream calls will be rejected")
    logger.info("Summarizer configured: {}", settings_cache.to_dict())
    yield


app = FastAPI(
    title="AI Text Summarizer API",
    version=VERSION,
    lifespan=lifespan,
)

# Register exception handlers
app.add_exception_handler(UpstreamTransportError, SummarizerExceptionHandler.upstream_transport_handler)     # type: ignore

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # the form may be served from another origin
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Routers
app.include_router(summarize.router, prefix="/api", tags=["summarize"])


@app.get("/")
async def hello():
    return {"msg": "Paste some text, get a summary back."}


@app.get("/healthz")
async def healthz():
    return {"ok": True, "version": VERSION}
