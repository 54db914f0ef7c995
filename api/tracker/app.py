"""FastAPI application for the hotel visit tracker.

Run:
    uv run uvicorn api.tracker.app:app --reload --port 8000
"""

import logging
import os
from contextlib import asynccontextmanager

logging.basicConfig(level=logging.INFO)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.tracker.customers import router as customer_router
from api.tracker.hotels import router as hotel_router
from api.tracker.loyalty import router as loyalty_router
from api.tracker.visitations import router as visitation_router
from db.client import init_db, close_db


def _cors_origins() -> list[str]:
    raw = os.getenv("VISITS_CORS_ORIGINS", "http://localhost:3000")
    return [o.strip() for o in raw.split(",") if o.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    try:
        yield
    finally:
        await close_db()


app = FastAPI(
    title="Hotel Visit Tracker",
    version="1.0.0",
    description="Customers, hotels, visits and loyalty analysis",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(customer_router)
app.include_router(hotel_router)
app.include_router(visitation_router)
app.include_router(loyalty_router)
