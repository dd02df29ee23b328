# app.py
import os
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import db
from routers import locations, settings

logging.basicConfig(level=(os.getenv("LOG_LEVEL") or "INFO").upper())

ALLOWED_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]
if os.getenv("FRONTEND_ORIGIN", "").strip():
    ALLOWED_ORIGINS.append(os.getenv("FRONTEND_ORIGIN").strip())

async def lifespan(app: FastAPI):
    if db.pool is not None:
        await db.pool.open()
        await db.ensure_schema()
    yield
    if db.pool is not None:
        await db.pool.close()

app = FastAPI(title="DHL Location Finder", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health")
async def health():
    return {"api": "ok", "db": db.pool is not None}

# роутеры
app.include_router(locations)
app.include_router(settings)
