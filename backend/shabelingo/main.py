import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from shabelingo.db import get_settings, verify_connection, close_client
from shabelingo.routers import categories_router, memos_router, review_router
from shabelingo.srs.config import get_review_settings

load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings = get_settings()
    review_settings = get_review_settings()

    print(
        f"✓ Review limits: due={review_settings.due_limit}, new={review_settings.new_limit}, "
        f"random={review_settings.random_limit} (window {review_settings.random_window}), "
        f"timeout={review_settings.query_timeout_seconds}s"
    )

    if settings.is_configured():
        if verify_connection():
            print("✓ Connected to Cosmos DB")
        else:
            print("✗ Failed to connect to Cosmos DB - check configuration")
    else:
        print("⚠ Cosmos DB not configured (COSMOS_ENDPOINT not set)")

    yield

    # Shutdown
    close_client()
    print("✓ Cosmos DB connection closed")


app = FastAPI(
    title="Shabelingo API",
    description="Memo store and spaced-repetition review backend",
    version="1.0.0",
    lifespan=lifespan,
)

cors_origins = os.getenv(
    "CORS_ORIGINS", "http://localhost:8081,http://localhost:19006"
).split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(memos_router)
app.include_router(categories_router)
app.include_router(review_router)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Shabelingo API",
        "version": "1.0.0",
        "endpoints": {
            "health": "/healthz",
            "memos": "/memos",
            "categories": "/categories",
            "review_session": "/review/session",
            "review": "/review/{memo_id}",
        },
    }


@app.get("/healthz")
async def healthz():
    """Health check endpoint."""
    return {"status": "healthy"}
